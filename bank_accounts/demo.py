"""
Console Demo

Opens a savings and a current account, runs a short series of operations
on each and renders every result as a console line.
"""

import uuid
from typing import Callable, List

from .accounts import open_savings_account, open_current_account, total_accounts
from .config import get_config
from .logging_config import setup_logging, get_logger, log_action


logger = get_logger(__name__)


def run_demo(emit: Callable[[str], None] = print) -> List[str]:
    """
    Run the demo scenario

    Args:
        emit: Called with each output line as it is produced

    Returns:
        All output lines, in order
    """
    lines: List[str] = []

    def out(line: str) -> None:
        lines.append(line)
        emit(line)

    run_id = str(uuid.uuid4())
    log_action(logger, "info", "Demo started", action="run_demo", correlation_id=run_id)

    out("Creating a Savings Account...")
    savings = open_savings_account("SA123", "Alice", 5000, 3.5)
    out(savings.check_balance().message)

    out("")
    out("Performing Savings Account Operations...")
    out(savings.deposit(2000).message)
    out(savings.withdraw(1000).message)
    out(savings.add_interest().message)

    out("")
    out("Creating a Current Account...")
    current = open_current_account("CA456", "Bob", 10000, 5000)
    out(current.check_balance().message)

    out("")
    out("Performing Current Account Operations...")
    out(current.deposit(5000).message)
    out(current.withdraw(20000).message)
    out(current.withdraw(5000).message)

    out("")
    out(f"Total Accounts Created: {total_accounts()}")

    log_action(
        logger, "info", "Demo finished", action="run_demo", correlation_id=run_id,
        extra={"total_accounts": total_accounts()}
    )
    return lines


def main() -> int:
    """Configure logging from the environment and run the demo"""
    cfg = get_config()
    setup_logging(cfg.log_level, log_format=cfg.log_format, log_file=cfg.log_file)
    run_demo()
    return 0
