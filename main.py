"""
Risk Reward Calculator - Position sizing from account risk

Given account balance, risk %, entry, stop loss and a risk:reward ratio,
prints the quantity to trade, dollar risk, take profit and potential profit.

Usage:
    python main.py                          # Size the configured default setup
    python main.py -b 50000 -r 1 -e 250 -s 240 -R 1:3
    python main.py -e 95 -s 100             # Stop above entry -> short
    python main.py --ratio ""               # No take profit
    python main.py --json                   # Machine-readable output
    python main.py --presets                # Show quick-pick values
    python main.py --status                 # Show configuration
"""

import argparse
import json
import sys
import logging
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent))

# Load .env file
from dotenv import load_dotenv
load_dotenv(Path(__file__).parent / 'config' / '.env')

from config import setup_logging_from_config, Config
from src.core.exceptions import ConfigurationError
from src.calculator import (
    CalculatorFormValues,
    build_presets,
    evaluate_form,
    parse_number,
    render_outcome,
    risk_helper_text
)
from src.risk import PositionSizer, format_currency, format_quantity


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description='Risk Reward Calculator - position sizing from account risk',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    python main.py -b 100000 -r 2 -e 100 -s 95 -R 1:2   # Long, 400 units, TP 110
    python main.py -e 95 -s 100                         # Short, TP 85
    python main.py --ratio ""                           # Skip take profit
        """
    )

    parser.add_argument('--balance', '-b', type=str, default=None, help='Account balance ($)')
    parser.add_argument('--risk', '-r', type=str, default=None, help='Risk % of balance (0-100]')
    parser.add_argument('--entry', '-e', type=str, default=None, help='Entry price')
    parser.add_argument('--stop', '-s', type=str, default=None, help='Stop loss price')
    parser.add_argument(
        '--ratio', '-R',
        type=str,
        default=None,
        help='Risk:reward ratio such as 1:2 (empty string disables take profit)'
    )

    parser.add_argument('--json', action='store_true', help='Print result as JSON')
    parser.add_argument('--presets', action='store_true', help='Show quick-pick presets and exit')
    parser.add_argument('--status', action='store_true', help='Show configuration and exit')
    parser.add_argument('--debug', '-d', action='store_true', help='Enable debug logging')
    parser.add_argument('--config', '-c', type=str, default=None, help='Path to YAML config file')

    return parser.parse_args(argv)


def build_form_values(args, config: Config) -> CalculatorFormValues:
    """Command line values override configured defaults."""
    defaults = config.calculator

    def pick(value, default):
        return default if value is None else value

    return CalculatorFormValues(
        account_balance=pick(args.balance, defaults.account_balance),
        risk_percent=pick(args.risk, defaults.risk_percent),
        entry_price=pick(args.entry, defaults.entry_price),
        stop_loss_price=pick(args.stop, defaults.stop_loss_price),
        risk_reward=pick(args.ratio, defaults.risk_reward)
    )


def show_presets(config: Config) -> None:
    """Show quick-pick presets."""
    presets = build_presets(
        config.presets.account_balances,
        config.presets.risk_percents,
        config.presets.risk_rewards
    )

    print("\n" + "=" * 60)
    print("RISK REWARD CALCULATOR - Presets")
    print("=" * 60)
    print(f"  Account Balance:   {', '.join(p.label for p in presets['account_balance'])}")
    print(f"  Risk %:            {', '.join(p.label for p in presets['risk_percent'])}")
    print(f"  Risk/Reward:       {', '.join(p.label for p in presets['risk_reward'])}")
    print("=" * 60)


def show_status(config: Config) -> None:
    """Show configuration."""
    print("\n" + "=" * 60)
    print("RISK REWARD CALCULATOR - Configuration")
    print("=" * 60)
    print(f"\nDefaults:")
    print(f"  Account Balance:   {config.calculator.account_balance}")
    print(f"  Risk %:            {config.calculator.risk_percent}")
    print(f"  Entry Price:       {config.calculator.entry_price}")
    print(f"  Stop Loss Price:   {config.calculator.stop_loss_price}")
    print(f"  Risk/Reward:       {config.calculator.risk_reward or '(none)'}")

    defaults = config.calculator
    helper = risk_helper_text(CalculatorFormValues(risk_percent=defaults.risk_percent))
    if helper:
        print(f"  {helper}")

    sizer = PositionSizer(
        account_balance=parse_number(defaults.account_balance),
        risk_percent=parse_number(defaults.risk_percent)
    )
    result = sizer.calculate_with_ratio(
        parse_number(defaults.entry_price),
        parse_number(defaults.stop_loss_price),
        defaults.risk_reward
    )
    symbol = config.formatting.currency_symbol
    print(f"\nDefault Setup:")
    if result is None:
        print("  (not computable)")
    else:
        print(f"  Quantity:          {format_quantity(result.quantity)} units ({result.direction.value})")
        print(f"  Risk Amount:       {format_currency(result.risk_amount, symbol)}")
        print(f"  Potential Profit:  {format_currency(result.potential_profit, symbol)}")
    print(f"\nLogging:")
    print(f"  Level:             {config.logging.level}")
    print(f"  Log File:          {config.logging.log_file or '(console only)'}")
    print("=" * 60)


def main(argv=None):
    """Main entry point."""
    args = parse_args(argv)

    try:
        config = Config.load(args.config)
    except ConfigurationError as e:
        print(f"Configuration error: {e}")
        return 1

    errors = config.validate()
    if errors:
        print("Configuration errors:")
        for error in errors:
            print(f"  - {error}")
        return 1

    setup_logging_from_config(config.logging, debug=args.debug)
    logger = logging.getLogger(__name__)

    if args.status:
        show_status(config)
        return 0

    if args.presets:
        show_presets(config)
        return 0

    values = build_form_values(args, config)
    logger.debug(f"Form values: {values.to_dict()}")

    outcome = evaluate_form(values)

    if args.json:
        payload = {
            'inputs': values.to_dict(),
            'error': outcome.error,
            'result': outcome.result.to_dict() if outcome.result else None
        }
        print(json.dumps(payload, indent=2))
    else:
        helper = risk_helper_text(values)
        if helper and outcome.ok:
            print(helper)
        print(render_outcome(outcome, config.formatting.currency_symbol))

    return 0 if outcome.ok else 1


if __name__ == '__main__':
    sys.exit(main())
