"""
Size Trades - Batch position sizing from a CSV file

Standalone script that sizes every setup in a CSV and writes the results.

Usage:
    python scripts/size_trades.py setups.csv
    python scripts/size_trades.py setups.csv --output sized.csv

CSV columns:
    account_balance,risk_percent,entry_price,stop_loss_price[,risk_reward]
"""

import argparse
import sys
from pathlib import Path

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

# Load .env file from config folder (must be before importing config)
from dotenv import load_dotenv
load_dotenv(PROJECT_ROOT / 'config' / '.env')

from config import Config, setup_logging_from_config
from src.core.exceptions import CalculatorException
from src.calculator.batch import load_trades, size_trades, summarize


def main(argv=None):
    """Run batch sizing with CLI arguments."""
    parser = argparse.ArgumentParser(
        description='Size a batch of trade setups from CSV',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Print sized setups
  python scripts/size_trades.py setups.csv

  # Write results to a file
  python scripts/size_trades.py setups.csv --output data/sized.csv
        """
    )

    parser.add_argument('input', type=str, help='CSV file of trade setups')
    parser.add_argument('--output', '-o', type=str, default=None, help='Write results to this CSV')
    parser.add_argument('--config', '-c', type=str, default=None, help='Path to YAML config file')
    parser.add_argument('--debug', '-d', action='store_true', help='Enable debug logging')

    args = parser.parse_args(argv)

    try:
        config = Config.load(args.config)
        setup_logging_from_config(config.logging, debug=args.debug)

        sized = size_trades(load_trades(args.input))
    except CalculatorException as e:
        print(f"Error: {e}")
        return 1

    if args.output:
        Path(args.output).parent.mkdir(parents=True, exist_ok=True)
        sized.to_csv(args.output, index=False)
        print(f"Results written to {args.output}")
    else:
        print(sized.to_string(index=False))

    stats = summarize(sized)
    symbol = config.formatting.currency_symbol
    print("\n" + "=" * 60)
    print(f"Setups:            {stats['total']} ({stats['sized']} sized, {stats['errors']} errors)")
    print(f"Long / Short:      {stats['long_count']} / {stats['short_count']}")
    print(f"Total Risk:        {symbol}{stats['total_risk']:,.2f}")
    print(f"Potential Profit:  {symbol}{stats['total_potential_profit']:,.2f}")
    print("=" * 60)

    return 0 if stats['errors'] == 0 else 1


if __name__ == '__main__':
    sys.exit(main())
