# SPDX-License-Identifier: MIT
"""Core model: source sets, targets, presets and the hierarchy linker."""
