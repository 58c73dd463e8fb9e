# SPDX-License-Identifier: MIT
"""Stored configuration and typed settings."""
