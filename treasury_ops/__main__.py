import argparse
import os

from .logging_config import get_logger
from .transfer import TreasuryTransferOperator

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def _default_log_level() -> str:
    # argparse does not check defaults against choices
    level = os.getenv("LOG_LEVEL", "INFO").upper()
    return level if level in LOG_LEVELS else "INFO"


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Withdraw 100,000 ZIR from the treasury to the escrow address")
    parser.add_argument("--env-file", type=str, default=None, help="dotenv file to load (default: .env in the working directory)")
    parser.add_argument("--log-level", type=str.upper, default=_default_log_level(),
                        choices=LOG_LEVELS, help="Console log level")
    parser.add_argument("--log-file", type=str, default=None, help="Optional JSON log file")

    args = parser.parse_args(argv)

    logger = get_logger("treasury_ops", args.log_level, args.log_file)
    operator = TreasuryTransferOperator(logger=logger, env_file=args.env_file)
    operator.run()

    # Outcome is reported on the console only; every run exits 0
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
