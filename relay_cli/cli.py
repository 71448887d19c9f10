"""LLM Relay CLI entrypoint."""

from __future__ import annotations

import json

import httpx
import typer

from .config import Config, load_config, save_config

app = typer.Typer(help="LLM Relay CLI - 릴레이 서버 실행 및 메시지 전송")


def _build_client(config: Config) -> httpx.Client:
    base_url = config.base_url.rstrip("/") + config.api_prefix.rstrip("/")
    return httpx.Client(base_url=base_url, timeout=90.0)


@app.command("serve")
def serve(
    host: str = typer.Option(None, "--host", help="바인딩 호스트 (기본값: settings.host)"),
    port: int = typer.Option(None, "--port", help="포트 (기본값: settings.port)"),
    reload: bool = typer.Option(False, "--reload", help="코드 변경 시 자동 재시작"),
) -> None:
    """릴레이 서버를 uvicorn으로 실행합니다."""
    import uvicorn

    from app.core.config import settings

    uvicorn.run(
        "app.main:app",
        host=host or settings.host,
        port=port or settings.port,
        reload=reload,
    )


@app.command("configure")
def configure(
    base_url: str = typer.Option(..., "--url", prompt=True, help="릴레이 기본 URL (예: http://localhost:8000)"),
    provider: str = typer.Option(None, "--provider", help="기본 프로바이더 ID (예: openai)"),
    api_prefix: str = typer.Option("/api", "--api-prefix", help="릴레이 API prefix"),
) -> None:
    """기본 설정을 저장합니다. API 키는 저장하지 않습니다."""
    save_config(Config(base_url=base_url, api_prefix=api_prefix, default_provider=provider or None))


@app.command("show-config")
def show_config() -> None:
    """현재 설정을 출력합니다."""
    typer.echo(json.dumps(load_config().to_dict(), indent=2, ensure_ascii=False))


@app.command("providers")
def list_providers() -> None:
    """실행 중인 릴레이에 등록된 프로바이더 목록을 출력합니다."""
    config = load_config()
    with _build_client(config) as client:
        try:
            response = client.get("/providers")
            response.raise_for_status()
        except httpx.HTTPError as exc:
            typer.echo(f"❌ 프로바이더 목록 조회 실패: {exc}", err=True)
            raise typer.Exit(1) from exc

    for item in response.json():
        typer.echo(f"{item['id']:<12} {item['name']:<18} {item['model']}")


@app.command("ask")
def ask(
    message: str = typer.Argument(..., help="보낼 메시지"),
    provider: str = typer.Option(None, "--provider", "-p", help="프로바이더 ID (기본값: 설정의 default_provider)"),
    key: str = typer.Option(
        ...,
        "--key",
        envvar="LLM_RELAY_KEY",
        help="프로바이더 API 키",
        hide_input=True,
    ),
    show_meta: bool = typer.Option(False, "--meta", help="프로바이더/지연 시간 정보도 출력"),
) -> None:
    """릴레이를 통해 메시지 하나를 전송하고 응답을 출력합니다."""
    config = load_config()
    provider = provider or config.default_provider
    if not provider:
        typer.echo("프로바이더가 지정되지 않았습니다. --provider 옵션을 사용하거나 `llm-relay configure --provider` 로 기본값을 설정하세요.", err=True)
        raise typer.Exit(1)

    with _build_client(config) as client:
        try:
            response = client.post("/chat", json={"provider": provider, "key": key, "message": message})
        except httpx.HTTPError as exc:
            typer.echo(f"❌ 릴레이 호출 실패: {exc}", err=True)
            raise typer.Exit(1) from exc

    try:
        data = response.json()
    except ValueError:
        data = None
    if not isinstance(data, dict):
        typer.echo(f"❌ 릴레이 응답을 해석할 수 없습니다 (status={response.status_code})", err=True)
        raise typer.Exit(1)

    if response.status_code != 200 or not data.get("success"):
        typer.echo(f"❌ {data.get('error') or response.status_code}", err=True)
        raise typer.Exit(1)

    typer.echo(data.get("response") or "")
    if show_meta:
        typer.echo(f"[{data.get('provider')} · {data.get('latency')}ms · {data.get('timestamp')}]")


if __name__ == "__main__":
    app()
