#!/usr/bin/env python3
# prompts.py

"""
Blocking prompt helpers for the inventory console.

Every helper keeps asking until the operator types something acceptable and
then returns it, so callers never see a validation failure.
"""

import logging
import math
import re


logger = logging.getLogger(__name__)

ITEM_ID_LENGTH = 4
_ALPHA_RE = re.compile(r"[A-Za-z]+")


def prompt_item_id() -> str:
    """Ask for a new item ID; only exactly ITEM_ID_LENGTH characters pass."""
    while True:
        item_id = input(f"Enter item ID ({ITEM_ID_LENGTH} characters): ").strip()
        if len(item_id) == ITEM_ID_LENGTH:
            return item_id
        logger.debug("Rejected item ID %r (length %d)", item_id, len(item_id))
        print(f"Invalid input. Item ID must be exactly {ITEM_ID_LENGTH} characters long.")


def prompt_alpha(prompt: str) -> str:
    # Letters only: "Acme Corp" is rejected because of the space.
    while True:
        value = input(prompt).strip()
        if _ALPHA_RE.fullmatch(value):
            return value
        logger.debug("Rejected non-alphabetic input %r", value)
        print("Invalid input. Please enter alphabetic characters only.")


def prompt_int(prompt: str) -> int:
    while True:
        try:
            val = int(input(prompt).strip())
            if val < 0:
                logger.debug("Rejected negative integer %d", val)
                print("Invalid input. Please enter a non-negative integer.")
                continue
            return val
        except ValueError:
            logger.debug("Rejected non-integer input")
            print("Invalid input. Please enter a non-negative integer.")


def prompt_float(prompt: str) -> float:
    while True:
        try:
            val = float(input(prompt).strip())
            if val < 0 or not math.isfinite(val):
                logger.debug("Rejected number %r", val)
                print("Invalid input. Please enter a non-negative number.")
                continue
            return val
        except ValueError:
            logger.debug("Rejected non-numeric input")
            print("Invalid input. Please enter a non-negative number.")
