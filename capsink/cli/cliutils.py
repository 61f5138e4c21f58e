import typing as t
import click
import colorama as clr


B_BLU = f"{clr.Style.BRIGHT}{clr.Fore.BLUE}"
B_YEL = f"{clr.Style.BRIGHT}{clr.Fore.YELLOW}"
CLR = clr.Style.RESET_ALL


def echo_err(txt: str) -> None:
    click.echo(
        f"{clr.Style.BRIGHT}{clr.Fore.RED}✖{clr.Style.RESET_ALL} {txt}", err=True)


def echo_ok(txt: str) -> None:
    click.echo(
        f"{clr.Style.BRIGHT}{clr.Fore.GREEN}✔{clr.Style.RESET_ALL} {txt}", err=True)


def fmt_errors(errors: t.Iterable[str]) -> str:
    return '\n'.join(f"  {B_YEL}-{CLR} {error}" for error in errors)
