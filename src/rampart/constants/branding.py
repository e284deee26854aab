"""Branding constants for terminal output."""

from __future__ import annotations

BRAND_NAME: str = "RAMPART"
ASCII_LOGO_LINES: tuple[str, ...] = (
    ">_ RAMPART",
    "     // hardening checks for Kubernetes manifests",
)
SCAN_SUMMARY_TITLE: str = "Scan summary"
CLI_DESCRIPTION: str = "\n".join((*ASCII_LOGO_LINES, "", f"{BRAND_NAME} manifest scanner"))
