"""
CLI interface for Charge Calculator.

Provides command-line access to the monthly charge calculation.
"""

import logging
import sys
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from charge_calculator.config.loader import load_rate_sheet
from charge_calculator.core.charge import Customer, Provider, base_charge, calculate_month_charge

app = typer.Typer()
console = Console()

EXIT_CODE_PASS = 0
EXIT_CODE_FAIL = 1


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging"
    )
):
    """Charge Calculator CLI."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)
    if ctx.invoked_subcommand is None:
        console.print("Charge Calculator - Use --help to see available commands")


@app.command()
def month(
    usage: float = typer.Option(
        ...,
        "--usage",
        "-u",
        help="Consumption units for the month"
    ),
    base_rate: Optional[float] = typer.Option(
        None,
        "--base-rate",
        "-r",
        help="Customer price per unit (overrides the rate sheet)"
    ),
    connection_charge: Optional[float] = typer.Option(
        None,
        "--connection-charge",
        "-c",
        help="Provider flat fee (overrides the rate sheet)"
    ),
    rates: Optional[str] = typer.Option(
        None,
        "--rates",
        help="Path to a YAML rate sheet"
    ),
    customer_name: Optional[str] = typer.Option(
        None,
        "--customer",
        help="Customer name in the rate sheet"
    ),
    provider_name: Optional[str] = typer.Option(
        None,
        "--provider",
        help="Provider name in the rate sheet"
    )
):
    """
    Calculate the charge of a full month.

    Rates come from --base-rate/--connection-charge, or from a rate sheet
    given with --rates together with --customer and --provider.
    """
    try:
        customer, provider = _resolve_inputs(
            base_rate, connection_charge, rates, customer_name, provider_name
        )
        total = calculate_month_charge(customer, usage, provider)

        _display_charge(customer, usage, provider, total)
        sys.exit(EXIT_CODE_PASS)
    except Exception as e:
        console.print(f"[red]Error:[/] {escape(str(e))}")
        sys.exit(EXIT_CODE_FAIL)


def _resolve_inputs(base_rate, connection_charge, rates, customer_name, provider_name):
    """Build customer and provider from direct values and an optional rate sheet."""
    if rates is not None:
        sheet = load_rate_sheet(rates)
        if base_rate is None:
            if customer_name is None:
                raise ValueError("--customer is required with --rates")
            base_rate = sheet.get_customer(customer_name).base_rate
        if connection_charge is None:
            if provider_name is None:
                raise ValueError("--provider is required with --rates")
            connection_charge = sheet.get_provider(provider_name).connection_charge

    if base_rate is None:
        raise ValueError("Missing base rate: pass --base-rate or --rates with --customer")
    if connection_charge is None:
        raise ValueError("Missing connection charge: pass --connection-charge or --rates with --provider")

    return Customer(base_rate=base_rate), Provider(connection_charge=connection_charge)


def _format_amount(amount: float) -> str:
    """Format an amount with thousands separators."""
    return f"{amount:,.2f}"


def _display_charge(customer, usage, provider, total):
    """Display the charge breakdown."""
    console.print("\n[bold]Monthly Charge[/bold]")
    console.print("-" * 40)
    console.print(f"Base rate: {customer.base_rate:g}")
    console.print(f"Usage: {usage:g}")
    console.print(f"Base charge: {_format_amount(base_charge(customer, usage))}")
    console.print(f"Connection charge: {_format_amount(provider.connection_charge)}")
    console.print(f"[bold]Total:[/bold] {_format_amount(total)}")


if __name__ == "__main__":
    app()
