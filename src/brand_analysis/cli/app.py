from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Optional

import typer

from ..adapters.simulated import SimulatedAnalysisClient
from ..config.settings import get_settings
from ..core.errors import ConfigurationError, MissingCredentialError
from ..core.logging import configure_logging
from ..core.types import HandlerResponse
from ..core.utils import SystemRandomSource
from ..reports.generator import ReportGenerator
from ..services.analyze_handler import AnalyzeHandler

app = typer.Typer(help="Brand Analysis CLI")


@app.callback()
def main_callback(
    log_level: Optional[str] = typer.Option(None, help="日誌等級，預設讀取 LOG_LEVEL"),
) -> None:
    """設定日誌。"""

    try:
        settings = get_settings()
    except ConfigurationError as error:
        typer.echo(f"[ERROR] {error}", err=True)
        raise typer.Exit(code=2)
    level_name = (log_level or settings.log_level).upper()
    configure_logging(level=_level_value(level_name))


@app.command("analyze")
def command_analyze(
    asset_name: str = typer.Argument(..., help="要分析的資產名稱，例如 example.com"),
    api_key: Optional[str] = typer.Option(None, help="呼叫端 API 金鑰，未提供時使用 GEMINI_API_KEY"),
    seed: Optional[int] = typer.Option(None, help="亂數種子，用於重現分數"),
    indent: int = typer.Option(2, help="JSON 縮排"),
) -> None:
    """直接產生單一資產的分析報告。"""

    settings = get_settings()
    generator = ReportGenerator(random_source=SystemRandomSource(seed))
    credential = api_key or settings.fallback_api_key
    try:
        report = generator.generate(asset_name, credential)
    except MissingCredentialError as error:
        typer.echo(f"[ERROR] {error.message}", err=True)
        raise typer.Exit(code=2)
    typer.echo(json.dumps(report.to_payload(), indent=indent, ensure_ascii=False))


@app.command("handle")
def command_handle(
    body_file: Optional[Path] = typer.Argument(None, help="請求內容檔案，省略時讀取標準輸入"),
    seed: Optional[int] = typer.Option(None, help="亂數種子，用於重現分數"),
) -> None:
    """以原始請求內容模擬一次伺服器端呼叫。"""

    if body_file is not None:
        raw = body_file.read_bytes()
    else:
        raw = sys.stdin.read()

    client = SimulatedAnalysisClient(ReportGenerator(random_source=SystemRandomSource(seed)))
    handler = AnalyzeHandler(settings=get_settings(), client=client)
    response = handler.handle(raw)
    _print_response(response)
    if not response.ok:
        raise typer.Exit(code=1)


def _print_response(response: HandlerResponse) -> None:
    """輸出狀態碼與 JSON 內容。"""

    typer.echo(f"Status: {response.status_code}")
    typer.echo(response.to_json())


def _level_value(level_name: str) -> int:
    value = logging.getLevelName(level_name)
    if not isinstance(value, int):
        raise typer.BadParameter(f"未知的日誌等級：{level_name}", param_hint="--log-level")
    return value
