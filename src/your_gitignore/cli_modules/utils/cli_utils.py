"""Common CLI utility functions."""

import logging

import click


def echo_success(message: str) -> None:
    """Echo a success message with consistent formatting.

    Args:
        message: Success message to display
    """
    click.echo(f"✅ {message}")


def echo_error(message: str) -> None:
    """Echo an error message with consistent formatting.

    Args:
        message: Error message to display
    """
    click.echo(f"❌ {message}", err=True)


def echo_warning(message: str) -> None:
    """Echo a warning message with consistent formatting.

    Args:
        message: Warning message to display
    """
    click.echo(f"⚠️  {message}", err=True)


def echo_info(message: str) -> None:
    """Echo an info message with consistent formatting.

    Args:
        message: Info message to display
    """
    click.echo(f"ℹ️  {message}")


def configure_logging(verbose: bool) -> None:
    """Send log records to stderr; debug level when *verbose*."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
