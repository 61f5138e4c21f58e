import os
import logging
import sys
from pathlib import Path
from functools import wraps
import click
from capsink.cli import conf
from capsink.cli.log import configure_logging, CLI_LOGGER_NAME
from capsink.cli.cliutils import echo_err, echo_ok, fmt_errors
from capsink.cli.copy import copy_files
from capsink.errors import SinkError
from capsink.sink import StreamSink
from capsink.utils.constants import CAPSINK_NAME, CAPSINK_VERSION
import colorama as clr


clr.init()


def valid_directory(ctx, param, val):
    if not os.path.isdir(val):
        raise click.BadParameter("should be a directory")
    return val


@click.group()
@click.version_option(CAPSINK_VERSION, prog_name=CAPSINK_NAME)
def cli():
    # NOTE: is run before eager commands like '--help'.
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s: %(message)s',
        datefmt='%H:%M:%S')


def command(load_config=False, **click_options):
    """Create a new top-level CLI command.

    Parameters
    ----------
    load_config: bool
        whether to load the capsink configuration file or not
    click_options
        options passed to @click.command

    Returns
    -------
        A decorated command function
    """
    def decorator(fn):
        @cli.command(**click_options)
        @click.option('--project', envvar='PROJECT', default=os.getcwd, callback=valid_directory,
                      show_default="current directory",
                      help="the directory containing the configuration file")
        @wraps(fn)
        def wrapper(project, *args, **kwargs):
            project = Path(project).absolute()
            log = logging.getLogger(CLI_LOGGER_NAME)

            if load_config:
                log.info(f"Loading configuration from '{project}'")
                try:
                    config = conf.load(project)
                except conf.ConfigurationNotFoundError as e:
                    echo_err(f"Could not find '{conf.CONF_NAME}' in '{e.project_dir}'")
                    sys.exit(1)
                except conf.ConfigurationFileInvalidError as e:
                    click.echo(fmt_errors(e.errors), err=True)
                    echo_err("Errors detected in configuration file. Please correct these and try again")
                    sys.exit(1)
                log = configure_logging(config)
                log.debug(f"logging at level '{config.logging.level}'")
                return fn(config, *args, **kwargs)
            return fn(project, *args, **kwargs)
        return wrapper
    return decorator


@command(load_config=False, help="create a default configuration file")
def init(project):
    conf_path = project.joinpath(conf.CONF_NAME)
    if conf_path.exists():
        echo_err(f"cannot initialize directory - '{conf.CONF_NAME}' already exists")
        sys.exit(1)
    conf.dump_default(conf_path)
    echo_ok(f"wrote '{conf_path}'")


@command(load_config=True, help="copy files line by line through a sink")
@click.option('--out', type=click.Path(dir_okay=False, writable=True), default=None,
              help="write to this file instead of stdout")
@click.argument('files', nargs=-1, required=True,
                type=click.Path(exists=True, dir_okay=False, readable=True))
def copy(config, out, files):
    try:
        if out:
            sink = StreamSink.open(out, newline=config.sink.newline, encoding=config.sink.encoding)
        else:
            sink = StreamSink(sys.stdout, newline=config.sink.newline)
        with sink:
            copy_files(sink, [Path(f) for f in files], encoding=config.sink.encoding)
    except SinkError as e:
        echo_err(str(e))
        sys.exit(1)
    except (OSError, UnicodeDecodeError) as e:
        echo_err(f"cannot read input: {e}")
        sys.exit(1)
    sys.exit(0)


# This allows running the program as a script by handing over control (and argument parsing) to click.
if __name__ == '__main__':
    cli()
