# SPDX-License-Identifier: MIT
"""Utility helpers."""
