from pathlib import Path
import io
import logging
import typing as t
import attr
import yaml
from capsink.errors import CapsinkError

log = logging.getLogger(__name__)

CONF_NAME = "capsink.conf.yml"

LOG_LEVELS = ['debug', 'info', 'warning', 'error', 'critical']


class CapsinkConfigurationError(CapsinkError):
    pass


def _nonempty_str(_, attribute, value):
    if not isinstance(value, str) or len(value) == 0:
        raise ValueError(f"{attribute.name} has to be a non-empty string")


def _text_codec(_, attribute, value):
    try:
        ''.encode(value)
    except (LookupError, TypeError):
        raise ValueError(f"{attribute.name}: unknown text encoding '{value}'")


def _log_format(_, attribute, value):
    try:
        logging.Formatter(fmt=value)
    except ValueError as e:
        raise ValueError(f"{attribute.name}: {e}")


@attr.s(frozen=True)
class ConfLogging:
    level = attr.ib(default='info', type=str, validator=attr.validators.in_(LOG_LEVELS))
    format = attr.ib(default='%(asctime)s - %(message)s', type=str,
                     validator=attr.validators.and_(
                         attr.validators.instance_of(str), _log_format))
    datefmt = attr.ib(default='%Y-%m-%d %H:%M:%S', type=str,
                      validator=attr.validators.instance_of(str))


@attr.s(frozen=True)
class ConfSink:
    # line separator written by `newline()`
    newline = attr.ib(default='\n', type=str, validator=_nonempty_str)
    encoding = attr.ib(default='utf-8', type=str, validator=_text_codec)


SECTIONS = {
    'logging': ConfLogging,
    'sink': ConfSink,
}


class ConfigurationNotFoundError(CapsinkConfigurationError):
    def __init__(self, project_dir: Path):
        self.project_dir = project_dir
        super().__init__(f"Could not find '{CONF_NAME}' in '{project_dir}'")


class ConfigurationFileInvalidError(CapsinkConfigurationError):
    def __init__(self, errors: t.List[str]):
        self.errors = errors
        super().__init__(f"configuration is invalid: {errors}")

    def __repr__(self):
        return f"{type(self).__name__}<{self.errors}>"


def _section(name: str, data: t.Any, errors: t.List[str]):
    cls = SECTIONS[name]
    if data is None:
        return cls()
    if not isinstance(data, dict):
        errors.append(f"{name}: expected a mapping, got '{type(data).__name__}'")
        return None
    fields = {a.name for a in attr.fields(cls)}
    unknown = sorted(set(data) - fields)
    if unknown:
        errors.append(f"{name}: unknown keys {unknown}")
        return None
    try:
        return cls(**data)
    except (TypeError, ValueError) as e:
        errors.append(f"{name}: {e.args[0]}")
        return None


@attr.s(frozen=True)
class Configuration:
    project = attr.ib(type=Path)
    logging = attr.ib(factory=ConfLogging, type=ConfLogging)
    sink = attr.ib(factory=ConfSink, type=ConfSink)

    @classmethod
    def from_dict(cls, project: Path, conf: t.Optional[dict]) -> "Configuration":
        if conf is None:
            conf = {}
        if not isinstance(conf, dict):
            raise ConfigurationFileInvalidError(
                [f"expected a mapping at the top level, got '{type(conf).__name__}'"])
        errors: t.List[str] = []
        unknown = sorted(set(conf) - set(SECTIONS))
        if unknown:
            errors.append(f"unknown sections {unknown}")
        sections = {
            name: _section(name, conf.get(name), errors)
            for name in SECTIONS
        }
        if errors:
            raise ConfigurationFileInvalidError(errors)
        return cls(project, **sections)


def pp_log_conf(config: Configuration):
    with io.StringIO() as sbuf:
        yaml.safe_dump({
            'logging': attr.asdict(config.logging),
            'sink': attr.asdict(config.sink),
        }, sbuf, default_flow_style=False, sort_keys=False)
        log.info("configuration used:\n" + '\n'.join([f"   {line}" for line in sbuf.getvalue().split('\n')]))


def load(project: Path) -> Configuration:
    conf_path = project.joinpath(CONF_NAME)
    try:
        with open(str(conf_path), 'r') as f:
            config = yaml.safe_load(f)
    except FileNotFoundError as e:
        raise ConfigurationNotFoundError(project) from e
    except yaml.YAMLError as e:
        raise ConfigurationFileInvalidError([f"malformed YAML: {e}"]) from e

    config_c = Configuration.from_dict(project, config)
    pp_log_conf(config_c)
    return config_c


def dump_default(path: Path) -> None:
    with open(str(path), 'w') as f:
        yaml.safe_dump({
            'logging': attr.asdict(ConfLogging()),
            'sink': attr.asdict(ConfSink()),
        }, f, default_flow_style=False, sort_keys=False)
