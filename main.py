#!/usr/bin/env python3
"""
Temperature Converter - Entry Point

Loads configuration, builds the terminal I/O pair and runs the
interactive conversion session.
"""

import argparse
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent))

from core.io import IOFactory
from core.services.conversion_service import ConversionService
from core.session import ConverterSession, GOODBYE
from utils.config import get_config_manager
from utils.logger import configure_logging, get_logger

logger = get_logger('main')


def print_banner(name: str, version: str):
    """Print startup banner"""
    title = f"{name} v{version}"
    print("=" * (len(title) + 8))
    print(f"    {title}")
    print("=" * (len(title) + 8))


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Convert temperatures between Celsius, Fahrenheit and Kelvin",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py
  python main.py --precision 4
  python main.py --config ./config --log-level DEBUG
        """
    )

    parser.add_argument(
        "--config",
        default="config",
        help="Directory containing settings.yaml (default: config)"
    )

    parser.add_argument(
        "--precision",
        type=int,
        default=None,
        help="Decimal places shown in results"
    )

    parser.add_argument(
        "--input",
        choices=["keyboard"],
        default=None,
        help="Input mode"
    )

    parser.add_argument(
        "--output",
        choices=["console"],
        default=None,
        help="Output mode"
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Log level for the converter log file"
    )

    parser.add_argument(
        "--no-banner",
        action="store_true",
        help="Skip the startup banner"
    )

    return parser.parse_args(argv)


def main(argv=None) -> int:
    """Main entry point"""
    args = parse_args(argv)

    try:
        config = get_config_manager(args.config)
        config.load_global_config()

        # CLI flags win over settings.yaml and environment
        if args.precision is not None:
            config.set('display.precision', args.precision)
        if args.log_level:
            config.set('logging.level', args.log_level)

        configure_logging(
            log_file=config.get('logging.file', 'logs/converter.log'),
            history_file=config.get('logging.history_file', 'logs/conversions.log'),
            level=config.get('logging.level', 'INFO')
        )

        if not args.no_banner:
            print_banner(
                config.get('app.name', 'Temperature Converter'),
                config.get('app.version', '1.1.0')
            )

        text_input, text_output = IOFactory.create_io_pair(
            input_mode=args.input or config.get('io.input', 'keyboard'),
            output_mode=args.output or config.get('io.output', 'console')
        )
        service = ConversionService(precision=int(config.get('display.precision', 2)))

        session = ConverterSession(text_input, text_output, service)
        completed = session.run()

        logger.info(f"Exiting after {completed} conversion(s): {service.get_stats()}")
        return 0

    except KeyboardInterrupt:
        print(f"\n\n{GOODBYE}")
        return 0

    except Exception as e:
        logger.critical(f"Converter error: {e}", exc_info=True)
        print(f"\nError: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
