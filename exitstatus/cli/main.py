import json
import logging
import subprocess
from typing import Optional, Sequence

import click

import exitstatus
from exitstatus import __version__ as about
from exitstatus import codes
from exitstatus.cli.config import setup_logging
from exitstatus.config import load_settings

# Get a logger for this module.
log = logging.getLogger(__name__)

# Shells report a child killed by signal N as 128 + N.
SIGNAL_EXIT_BASE = 128

# Define an epilog message with examples.
EPILOG = f"""
Examples:

{click.style('• list all named exit codes', fg="green")}

    $ exitstatus codes

{click.style('• explain what exit status 74 stands for', fg="green")}

    $ exitstatus explain 74

{click.style('• run a command and exit with IO_ERR if it fails', fg="green")}

    $ exitstatus run --code 74 -- cp big.iso /mnt/usb
"""


@click.group(
    help=about.__description__,
    epilog=EPILOG,
    no_args_is_help=True,
)
@click.version_option(
    about.__version__,
    prog_name=about.__title__,
    message="%(prog)s, version %(version)s\nCheck {url} for more info".format(url=about.__url__),
)
def cli() -> None:
    """Entry point group for the exitstatus console script."""


@cli.command("codes")
@click.option(
    "--json", "json_output",
    is_flag=True,
    default=False,
    help="Emit the table as JSON",
)
def list_codes(json_output: bool) -> None:
    """List all named exit codes."""
    if json_output:
        payload = [
            {"code": code, "name": name, "description": description}
            for code, (name, description) in sorted(codes.CODES.items())
        ]
        click.echo(json.dumps(payload, indent=2))
        return

    for code, (name, description) in sorted(codes.CODES.items()):
        click.echo(f"{code:>3}  {name:<12} {description}")


@cli.command("explain")
@click.argument("code", type=click.INT)
def explain(code: int) -> None:
    """Print the name and meaning of exit status CODE."""
    described = codes.describe(code)
    if described is None:
        raise exitstatus.errorf(codes.USAGE, "exit status %d has no conventional meaning", code)

    name, description = described
    click.echo(f"{code} {click.style(name, fg='blue')}: {description}")


@cli.command("run", context_settings={"ignore_unknown_options": True})
@click.option(
    "--code", "-c",
    "pinned_code",
    type=click.IntRange(min=0, max=255),
    default=None,
    help="Exit with this status on failure instead of the command's own",
)
@click.argument("command", nargs=-1, required=True, type=click.UNPROCESSED)
def run(pinned_code: Optional[int], command: Sequence[str]) -> None:
    """
    Run COMMAND and exit with a status derived from its failure.

    Without ``--code`` the child's own exit status is passed on. A child killed
    by signal N exits with 128 + N, as shells report it.
    """
    log.info("Running %s", " ".join(command))
    try:
        subprocess.run(list(command), check=True)
    except FileNotFoundError as exc:
        raise exitstatus.errorf(codes.NO_INPUT, "cannot run %s: %w", command[0], exc)
    except subprocess.CalledProcessError as exc:
        if pinned_code is not None:
            raise exitstatus.error(pinned_code, exc)
        if exc.returncode < 0:
            # Negative return codes carry the signal number.
            raise exitstatus.error(SIGNAL_EXIT_BASE - exc.returncode, exc)
        raise


def main(args: Optional[Sequence[str]] = None) -> None:
    """
    Run the console script and terminate with the resolved exit status.

    Click runs in non-standalone mode, so every outcome, help requests and
    usage errors included, goes through ``exitstatus.exit``.
    """
    settings = load_settings()
    setup_logging(settings.log_level)

    err: Optional[BaseException] = None
    try:
        result = cli.main(args=args, prog_name=about.__title__, standalone_mode=False)
    except click.ClickException as exc:
        exc.show()
        err = exc
    except click.Abort as exc:
        click.echo("Aborted!", err=True)
        err = exc
    except Exception as exc:
        click.echo(f"Error: {exc}", err=True)
        log.debug("Command failed", exc_info=exc)
        err = exc
    else:
        # Click returns the status of an explicit ctx.exit() in this mode.
        if isinstance(result, int) and result:
            err = click.exceptions.Exit(result)

    exitstatus.exit(err)


if __name__ == "__main__":
    main()
