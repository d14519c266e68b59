"""Command-line interface for linksync."""

from __future__ import annotations

import asyncio as asyncio
import logging as logging

from linksync.cli.app import main as main
from linksync.cli.parser import build_parser as build_parser
from linksync.cli.sync import format_sync_summary as format_sync_summary
from linksync.cli.sync import run_sync as _run_sync
from linksync.sdk import LinkSync as LinkSync
from linksync.sdk import load_config as load_config


__all__ = ["build_parser", "format_sync_summary", "main"]
