from fastapi import APIRouter, HTTPException, Request, status

from ..domain import ConfigSource
from ..models import FieldResolutionOut, FieldSpecOut, Schema, SchemaOut, ServiceSettings, SettingsOut
from ..services import bind
from ..utils import EnvConfig

router = APIRouter(prefix="/settings", tags=["Settings"])


def _source(request: Request) -> ConfigSource:
    return getattr(request.app.state, "config_source", None) or EnvConfig()


@router.get("", response_model=SettingsOut, summary="Resolved service settings")
def resolved_settings(request: Request) -> SettingsOut:
    """Binds ServiceSettings against the active source and reports each field."""
    result = bind(ServiceSettings(), _source(request))
    if not result.ok:
        err = result.error
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={"code": err.code.value, "message": str(err)},
        )
    return SettingsOut(
        status="ok",
        fields=[
            FieldResolutionOut(name=r.name, kind=r.kind.value, value=r.value, origin=r.origin.value)
            for r in result.fields
        ],
    )


@router.get("/schema", response_model=SchemaOut, summary="Service settings schema")
def settings_schema() -> SchemaOut:
    table = Schema.describe(ServiceSettings)
    return SchemaOut(
        fields=[
            FieldSpecOut(name=f.name, kind=f.kind.value, default=f.default, type_name=f.type_name)
            for f in table
        ]
    )
