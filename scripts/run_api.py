#!/usr/bin/env python3
"""
FastAPIサーバーを起動するエントリポイント
"""
import sys
from pathlib import Path

# プロジェクトルートをPYTHONPATHに追加
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import uvicorn

from infrastructure.config.env_config_loader import EnvConfigLoader

if __name__ == "__main__":
    settings = EnvConfigLoader().load()
    uvicorn.run(
        "api.main:app",
        host=settings.host,
        port=settings.port,
        # X-Forwarded-* は RequestUrlResolver が解釈する
        proxy_headers=False,
        reload=True  # 開発時の自動リロード
    )
