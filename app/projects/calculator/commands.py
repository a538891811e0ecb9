import click
from flask.cli import with_appcontext
from app.projects.calculator.core import keypad
from app.projects.calculator.core.errors import DivisionByZero, ResultOutOfRange
from app.projects.calculator.core.service import (
    clear_calculation_history,
    get_calculation_history,
    perform_calculation,
)
import logging

logger = logging.getLogger(__name__)

@click.group(name='calculator')
def calculator_cli():
    """Kids Calculator commands."""
    pass

@calculator_cli.command('history')
@click.option('--limit', default=None, type=click.IntRange(min=0), help='Only show the N most recent calculations')
@with_appcontext
def history_command(limit):
    """Print calculation history, most recent first."""
    calculations = get_calculation_history()
    if limit is not None:
        calculations = calculations[:limit]

    if not calculations:
        click.echo("No calculations yet.")
        return

    for c in calculations:
        text = keypad.describe(c.first_number, c.operation, c.second_number, c.result)
        click.echo(f"#{c.id}  {text}  ({c.created_at.isoformat()})")

@calculator_cli.command('clear-history')
@with_appcontext
def clear_history_command():
    """Delete every saved calculation."""
    outcome = clear_calculation_history()
    click.echo(outcome['message'])
    click.echo(f"  - Removed {outcome['deleted']} calculation(s)")

@calculator_cli.command('keys')
@click.argument('sequence')
@with_appcontext
def keys_command(sequence):
    """
    Type a key sequence on the keypad, e.g. "12+3=" or "2.5x1.5=".

    Digits, '.', operation keys (+ - * x / and the on-screen symbols),
    '=' to evaluate and 'c' to clear. Each evaluation is saved to history.
    """
    state = keypad.clear()
    for key in sequence.replace(' ', ''):
        if key in keypad.DIGITS:
            state = keypad.press_digit(state, key)
        elif key == '.':
            state = keypad.press_decimal(state)
        elif key.lower() == 'c':
            state = keypad.clear()
        elif key == '=' or keypad.key_to_operation(key) is not None:
            next_op = keypad.key_to_operation(key)
            if next_op is not None:
                chained = keypad.press_operation(state, next_op)
                if chained is not state:
                    state = chained
                    continue
            request = keypad.pending_request(state)
            if request is None:
                continue
            try:
                outcome = perform_calculation(*request)
            except (DivisionByZero, ResultOutOfRange) as e:
                click.echo(f"Error: {e.message}", err=True)
                state = keypad.clear()
                continue
            first_number, second_number, operation = request
            click.echo(keypad.describe(first_number, operation, second_number, outcome.result))
            state = keypad.show_result(state, outcome.result, next_operation=next_op)
        else:
            raise click.BadParameter(f"Unknown key {key!r}", param_hint='SEQUENCE')

    click.echo(state.display)
