"""Utility functions for working with lists of addresses."""

from mailsyntax.utils.address_utils import extract_addresses, partition_addresses

__all__ = ["extract_addresses", "partition_addresses"]
