#!/usr/bin/env python3
"""
JUPAG - Logging
"""

import logging
from logging.handlers import RotatingFileHandler

from .config import ClientConfig


class JupagLogger:
    """
    Thin wrapper over the "JUPAG" logger with helpers for the events
    the client and the flows report. Never logs key material.
    """

    def __init__(self, config: ClientConfig):
        self.logger = logging.getLogger("JUPAG")
        self.logger.setLevel(getattr(logging, config.log_level.upper(), logging.INFO))

        # getLogger returns a shared instance; handlers stack if not checked.
        if not self.logger.handlers:
            console = logging.StreamHandler()
            console.setFormatter(logging.Formatter(
                '%(asctime)s | %(levelname)8s | %(message)s',
                datefmt='%H:%M:%S'
            ))
            self.logger.addHandler(console)

            if config.log_file:
                file_handler = RotatingFileHandler(
                    config.log_file,
                    maxBytes=10_000_000,  # 10MB
                    backupCount=5
                )
                file_handler.setFormatter(logging.Formatter(
                    '%(asctime)s | %(levelname)8s | %(name)s | %(message)s'
                ))
                self.logger.addHandler(file_handler)

    def request_sent(self, method: str, path: str):
        self.logger.debug(f"{method} {path}")

    def request_failed(self, method: str, path: str, status: int, body: str):
        self.logger.warning(f"{method} {path} failed: {status} {body[:200]}")

    def transaction_signed(self, signature: str):
        self.logger.info(f"Transaction signed: {signature[:16]}...")

    def transaction_assembled(self, num_instructions: int, num_tables: int, size: int):
        self.logger.info(
            f"Assembled {num_instructions} instructions "
            f"with {num_tables} lookup tables ({size} bytes)"
        )

    def transaction_sent(self, signature: str):
        self.logger.info(f"Transaction sent: {signature}")

    def transaction_confirmed(self, signature: str, status: str):
        self.logger.info(f"Transaction {status}: {signature}")

    def error(self, context: str, error: Exception):
        self.logger.error(f"{context}: {str(error)}")

    def info(self, message: str):
        self.logger.info(message)

    def warning(self, message: str):
        self.logger.warning(message)

    def debug(self, message: str):
        self.logger.debug(message)
