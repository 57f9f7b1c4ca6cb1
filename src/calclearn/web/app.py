from __future__ import annotations

import logging
import os

from fastapi import FastAPI

from ..features.dialog import SkillConfig, SkillService, create_skill_routers


def create_app(service: SkillService | None = None) -> FastAPI:
    service = service or SkillService(SkillConfig.from_env())
    app = FastAPI(title="calclearn")
    router_v1, router_legacy = create_skill_routers(service)
    app.include_router(router_v1)
    app.include_router(router_legacy)

    @app.get("/healthz")
    def healthz() -> dict[str, str]:
        return {"status": "ok"}

    return app


def main() -> None:  # pragma: no cover - runner
    import uvicorn

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    host = os.environ.get("BIND", "0.0.0.0")
    port = int(os.environ.get("PORT", "8000"))
    uvicorn.run(create_app(), host=host, port=port, factory=False)


if __name__ == "__main__":  # pragma: no cover
    main()
