"""examples/basic_usage.py - logfacade demo.

Runs the same failing payment flow twice:
    Run A - INFO:  causes are summarized on one line
    Run B - DEBUG: causes are logged with their full traceback

Try ``LOGFACADE_LEVEL=debug python examples/basic_usage.py`` to start at DEBUG.
"""

import logging

from logfacade import configure, get_logger

configure(fmt="%(asctime)s [%(levelname)s] %(name)s (%(filename)s:%(lineno)d): %(message)s")

LOG = get_logger()


class InsufficientFunds(Exception):
    pass


class PaymentService:
    LOG = get_logger()

    def get_balance(self, user_id: int) -> int:
        self.LOG.debugf("querying balance: user_id=%d", user_id)
        return 3_000

    def pay(self, user_id: int, amount: int) -> None:
        self.LOG.infof("payment attempt: user_id=%d, amount=%d", user_id, amount)
        balance = self.get_balance(user_id)

        if balance < amount:
            raise InsufficientFunds(
                f"balance={balance}, requested={amount}\n(account is not overdraft-enabled)"
            )

        self.LOG.info("payment successful")


def run(service: PaymentService) -> None:
    try:
        service.pay(user_id=101, amount=5_000)
    except InsufficientFunds as exc:
        service.LOG.warn_debugf(exc, "payment for user %d rejected", 101)

    # A broken format string is reported, never raised.
    LOG.infof("processed %d payments", "one")


if __name__ == "__main__":
    service = PaymentService()

    print("=" * 60)
    print("Run A: INFO (one-line cause summary)")
    print("=" * 60)
    run(service)

    print()
    print("=" * 60)
    print("Run B: DEBUG (full traceback)")
    print("=" * 60)
    logging.getLogger().setLevel(logging.DEBUG)
    run(service)
