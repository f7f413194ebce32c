# chaininfo/interface/api/server.py

import logging
from contextlib import asynccontextmanager
from typing import Any, Callable, Dict, NamedTuple, Optional, Type

from fastapi import FastAPI, Depends, HTTPException, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from chaininfo.core.exceptions import ChainInfoError, EmptyChainError, InvalidArgumentError
from chaininfo.core.interfaces.i_chain_store import IChainStore
from chaininfo.core.services.block_resolver import BlockResolver
from chaininfo.infra.persistence.database_manager import DatabaseManager
from chaininfo.infra.persistence.repository_factory import RepositoryFactory
from chaininfo.interface.api import schemas
from chaininfo.interface.api.config import ApiConfig, settings
from chaininfo.interface.api.dependencies import get_block_service

logger = logging.getLogger(__name__)

_STATUS_BY_KIND = {
    "invalid_argument": status.HTTP_400_BAD_REQUEST,
    "not_found": status.HTTP_404_NOT_FOUND,
    "chain_empty": status.HTTP_503_SERVICE_UNAVAILABLE,
}

# ==============================================================================
# 🏗️ SERVICE LAYER
# ==============================================================================

class BlockInfoService:
    def __init__(self, store: IChainStore, config: ApiConfig):
        self.store = store
        self.config = config
        self.resolver = BlockResolver(store)

    def _guard(self, operation: Callable[[], Any]) -> Any:
        try:
            return operation()
        except ChainInfoError:
            raise
        except Exception:
            logger.exception("Error crítico consultando la cadena")
            raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Error interno consultando la cadena.")

    def get_block_info(self, req: schemas.BlockInfoRequest) -> schemas.BlockInfoResponse:
        summary = self._guard(lambda: self.resolver.resolve_one(req.to_spec()))
        return schemas.BlockInfoResponse(block=schemas.BlockInfo.from_summary(summary))

    def get_blocks_info(self, req: schemas.BlocksInfoRequest) -> schemas.BlocksInfoResponse:
        if req.number > self.config.max_blocks_per_request:
            raise InvalidArgumentError(
                f"Cannot request more than {self.config.max_blocks_per_request} blocks",
                req.number
            )

        summaries = self._guard(lambda: self.resolver.resolve_range(req.height, req.number))
        return schemas.BlocksInfoResponse(
            blocks=[schemas.BlockInfoResponse(block=schemas.BlockInfo.from_summary(s)) for s in summaries]
        )

    def get_height(self, req: Optional[schemas.HeightRequest]) -> schemas.BlockInfoResponse:
        if req is not None and req.stream:
            raise InvalidArgumentError("Streaming is not supported by this node")

        summary = self._guard(self.resolver.resolve_latest)
        return schemas.BlockInfoResponse(block=schemas.BlockInfo.from_summary(summary))

    def get_status(self) -> schemas.NodeStatusResponse:
        height: Optional[int] = None
        try:
            height = self.store.head_header().sequence
        except EmptyChainError:
            pass

        return schemas.NodeStatusResponse(
            height=height,
            genesis_sequence=self.store.genesis_sequence,
            storage_engine=self.config.storage_engine
        )

# ==============================================================================
# 🧭 TABLA DE RUTAS
# ==============================================================================

class Route(NamedTuple):
    method: str
    endpoint: Callable[..., Any]
    response_model: Type[BaseModel]
    tag: str

def get_block_info(req: schemas.BlockInfoRequest, service: BlockInfoService = Depends(get_block_service)):
    return service.get_block_info(req)

def get_blocks_info(req: schemas.BlocksInfoRequest, service: BlockInfoService = Depends(get_block_service)):
    return service.get_blocks_info(req)

def get_height(req: Optional[schemas.HeightRequest] = None, service: BlockInfoService = Depends(get_block_service)):
    return service.get_height(req)

def get_status(service: BlockInfoService = Depends(get_block_service)):
    return service.get_status()

def build_route_table() -> Dict[str, Route]:
    """Mapa explícito ruta -> handler. Se construye una vez por aplicación."""
    return {
        "/node/getBlockInfo": Route("POST", get_block_info, schemas.BlockInfoResponse, "Node"),
        "/node/getBlocksInfo": Route("POST", get_blocks_info, schemas.BlocksInfoResponse, "Node"),
        "/node/getHeight": Route("POST", get_height, schemas.BlockInfoResponse, "Node"),
        "/status": Route("GET", get_status, schemas.NodeStatusResponse, "Sistema"),
    }

def register_routes(app: FastAPI, table: Dict[str, Route]) -> None:
    for path, route in table.items():
        app.add_api_route(
            path,
            route.endpoint,
            methods=[route.method],
            response_model=route.response_model,
            tags=[route.tag]
        )

async def chain_info_error_handler(request: Request, exc: ChainInfoError) -> JSONResponse:
    code = _STATUS_BY_KIND.get(exc.kind, status.HTTP_400_BAD_REQUEST)
    logger.info(f"Consulta rechazada ({exc.kind}): {exc.message}")
    return JSONResponse(status_code=code, content=schemas.ErrorResponse(**exc.to_dict()).model_dump())

# ==============================================================================
# 🚀 APP FACTORY
# ==============================================================================

def create_app(store: Optional[IChainStore] = None, config: Optional[ApiConfig] = None) -> FastAPI:
    """
    Arma la aplicación. Si no se inyecta 'store', el lifespan abre la cadena
    configurada (RepositoryFactory) al arrancar y la cierra al apagar.
    """
    api_config = config or settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        owns_store = getattr(app.state, "block_service", None) is None
        if owns_store:
            logger.info("📦 [BOOT] Abriendo la cadena configurada...")
            app.state.block_service = BlockInfoService(RepositoryFactory.create_chain_store(), api_config)
        try:
            yield
        finally:
            if owns_store:
                logger.info("🛑 Cerrando la cadena...")
                app.state.block_service = None
                DatabaseManager.reset()

    app = FastAPI(title=api_config.title, version=api_config.version, lifespan=lifespan)
    app.add_middleware(CORSMiddleware, allow_origins=["*"], allow_credentials=True, allow_methods=["*"], allow_headers=["*"])
    app.add_exception_handler(ChainInfoError, chain_info_error_handler)

    app.state.block_service = BlockInfoService(store, api_config) if store is not None else None

    register_routes(app, build_route_table())
    return app

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("chaininfo.interface.api.server:create_app", factory=True, host=settings.host, port=settings.port)
