from fastapi import APIRouter, Depends

from app.domain.providers import ProviderRegistry, get_registry
from app.schemas.chat import ProviderInfo

router = APIRouter(prefix="/providers", tags=["providers"])


@router.get("", response_model=list[ProviderInfo], summary="List registered providers")
async def list_providers(registry: ProviderRegistry = Depends(get_registry)) -> list[ProviderInfo]:
    return [
        ProviderInfo(id=adapter.provider_id, name=adapter.display_name, model=adapter.model)
        for adapter in registry
    ]
