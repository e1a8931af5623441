"""Serves the OpenAPI document as YAML next to the interactive docs."""
import yaml
from fastapi import APIRouter, Request
from fastapi.responses import Response

router = APIRouter()


@router.get("/api-docs/openapi.yaml", include_in_schema=False)
def openapi_yaml(request: Request) -> Response:
    document = yaml.dump(request.app.openapi(), default_flow_style=False, sort_keys=False)
    return Response(content=document, media_type="application/yaml")
