#!/usr/bin/env python3
"""
Domain Records Manager - Command Line Interface

Main entry point for the Domain Records Manager CLI.
"""

import argparse
import logging
import sys
from typing import Dict

import yaml

from ..core.dns_manager import DNSManager
from ..errors import DomainRecordsError
from ..parsers.desired_state import DesiredStateParser

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Domain Records Manager - Declarative registrar DNS record management"
    )

    parser.add_argument(
        "--config",
        "-c",
        default="configs/config.yaml",
        help="Configuration file path (default: configs/config.yaml)",
    )

    parser.add_argument(
        "--state",
        "-s",
        default="domain_records_state.yaml",
        help="State file holding domain identifiers (default: domain_records_state.yaml)",
    )

    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable verbose logging"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    apply_parser = subparsers.add_parser("apply", help="Apply a desired-state file")
    apply_parser.add_argument("file", help="YAML file describing the desired records")
    apply_parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Show the records that would be pushed without making changes",
    )
    apply_parser.add_argument(
        "--output-file",
        "-o",
        help="File to save dry run output (only used with --dry-run)",
    )

    show_parser = subparsers.add_parser("show", help="Show the current records of a domain")
    show_parser.add_argument("domain", help="Domain name")
    show_parser.add_argument("--customer", default="", help="Customer (sub-account) ID")

    destroy_parser = subparsers.add_parser(
        "destroy", help="Restore a domain to the default record set"
    )
    destroy_parser.add_argument("domain", help="Domain name")
    destroy_parser.add_argument("--customer", default="", help="Customer (sub-account) ID")
    destroy_parser.add_argument(
        "--nameserver",
        action="append",
        default=[],
        dest="nameservers",
        help="Nameserver to keep (repeatable)",
    )

    import_parser = subparsers.add_parser("import", help="Import an existing domain")
    import_parser.add_argument("identifier", help="Domain name to import")
    import_parser.add_argument("--customer", default="", help="Customer (sub-account) ID")

    return parser


def main(argv=None):
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    if getattr(args, "output_file", None) and not args.dry_run:
        print("Error: --output-file can only be used with --dry-run")
        sys.exit(1)

    config = load_config(args.config)
    config_logger(config, verbose=args.verbose)

    try:
        dns_manager = DNSManager(config, state_path=args.state)

        if args.command == "apply":
            domains = DesiredStateParser(args.file).parse()
            success = dns_manager.apply(
                domains,
                dry_run=args.dry_run,
                output_file=args.output_file if args.dry_run else None,
            )
        elif args.command == "show":
            success = dns_manager.show(args.domain, args.customer)
        elif args.command == "destroy":
            success = dns_manager.destroy(args.domain, args.customer, args.nameservers)
        else:
            success = dns_manager.import_domain(args.identifier, args.customer)

        if success:
            print("Domain record management completed successfully")
            sys.exit(0)
        else:
            print("Domain record management failed")
            sys.exit(1)

    except (DomainRecordsError, OSError, ValueError) as e:
        print(f"Error: {e}")
        if args.verbose:
            import traceback

            traceback.print_exc()
        sys.exit(1)


def load_config(config_path: str) -> Dict:
    """Load configuration from YAML file."""
    try:
        with open(config_path, "r") as f:
            config = yaml.safe_load(f) or {}
        logger.info(f"Configuration loaded from {config_path}")
        return config
    except FileNotFoundError:
        logger.warning(f"Config file {config_path} not found, using defaults")
        return get_default_config()
    except yaml.YAMLError as e:
        logger.error(f"Error parsing config file: {e}")
        sys.exit(1)


def get_default_config() -> Dict:
    """Return default configuration."""
    return {
        "providers": {"mock": {}},
        "default_provider": "mock",
        "logging": {"level": "INFO", "file": "domain_records_manager.log"},
    }


def config_logger(config: Dict, verbose: bool = False):
    """Configure logging."""
    logging_config = config.get("logging", None)
    if logging_config:
        log_level = "DEBUG" if verbose else logging_config.get("level", "INFO")
        log_file = logging_config.get("file", "domain_records_manager.log")

        logging.basicConfig(
            level=log_level,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            handlers=[
                logging.FileHandler(log_file),
                logging.StreamHandler(sys.stdout),
            ],
        )
        return

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )


if __name__ == "__main__":
    main()
