"""FastAPI アプリケーション - リクエストから外部URLを導出する"""
from fastapi import Depends, FastAPI, HTTPException, Query, Request, status
from pydantic import BaseModel, Field

from application.services.url_resolver import RequestUrlResolver
from domain.exceptions import ParseError
from domain.resolved_base import ResolvedBase
from infrastructure.config.env_config_loader import EnvConfigLoader
from infrastructure.http.starlette_request_adapter import to_inbound_request
from infrastructure.logging.log_setup import setup_console_logging
from infrastructure.logging.loguru_logger import LoguruLogger


class LinksResponse(BaseModel):
    """現在のリクエストから導出したリンク"""
    current: str = Field(description="Absolute URL of this request")
    origin: str = Field(description="Scheme and host only")
    parent: str = Field(description="One path level up, query kept")
    root: str = Field(description="Site root without query")
    next: str = Field(description="Same path with the next page number")


# 設定（起動時に一度だけ読み込む）
SETTINGS = EnvConfigLoader().load()
setup_console_logging(SETTINGS.log_level, json_output=SETTINGS.log_json)

LOGGER = LoguruLogger()
RESOLVER = RequestUrlResolver(SETTINGS.resolver, LOGGER.bind(component="url_resolver"))

# FastAPIアプリケーション
app = FastAPI(
    title="Forwarded URL Helper",
    description="リバースプロキシ配下で外部向けURLを生成する",
    version="1.0.0",
)


def get_resolved_base(request: Request) -> ResolvedBase:
    """
    Resolve the external base URL of the current request.

    Routes that need absolute links depend on this.
    """
    try:
        return RESOLVER.resolve(to_inbound_request(request))
    except ParseError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))


@app.get("/")
def read_root():
    """ヘルスチェック"""
    return {"status": "ok", "service": "forwarded-url-helper"}


@app.get("/links", response_model=LinksResponse)
def read_links(
    page: int = Query(default=1, ge=1),
    base: ResolvedBase = Depends(get_resolved_base),
) -> LinksResponse:
    return LinksResponse(
        current=base.current(),
        origin=base.scheme_and_host(),
        parent=base.join_path(".."),
        root=base.set_path("/"),
        next=base.join_path_with_query("", {"page": str(page + 1)}),
    )
