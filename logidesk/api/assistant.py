from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional
import logging

from logidesk.container import ServiceContainer
from logidesk.errors import ProviderError, ValidationError
from logidesk.models.assistant import AssistantProxyRequest, AssistantProxyResponse
from logidesk.services.assistant import UploadedFileMetadata, run_assistant

from .deps import get_container

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["assistant"])


class AttachFileRequest(BaseModel):
    name: str
    type: str = ""
    content: str


class AttachFileResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    file: UploadedFileMetadata
    notice: Optional[str] = None


class UploadedFilesResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    current: Optional[str] = None
    files: List[UploadedFileMetadata] = Field(default_factory=list)


@router.post("/ai-assistant", response_model=AssistantProxyResponse, response_model_by_alias=True)
async def ai_assistant(request: AssistantProxyRequest, container: ServiceContainer = Depends(get_container)):
    """Stateless assistant call: build the prompt, ask the provider, interpret any action"""
    try:
        return await run_assistant(
            request,
            client=container.chat_client,
            max_content_chars=container.settings.max_content_chars,
            history_window=container.settings.history_window,
        )
    except ValidationError as e:
        return JSONResponse(status_code=400, content={"success": False, "error": str(e)})
    except ProviderError as e:
        logger.error(f"Error in AI assistant: {e.message}")
        return JSONResponse(status_code=500, content={"success": False, "error": e.message})


@router.post("/assistant/file", response_model=AttachFileResponse, response_model_by_alias=True)
async def attach_file(request: AttachFileRequest, container: ServiceContainer = Depends(get_container)):
    """Attach a file to the current chat session"""
    try:
        metadata = container.files.attach(request.name, request.type, request.content)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"file": metadata, "notice": container.files.last_notice}


@router.get("/assistant/file", response_model=UploadedFilesResponse, response_model_by_alias=True)
async def list_files(container: ServiceContainer = Depends(get_container)):
    """Previously uploaded files and the name of the one attached to this session"""
    current = container.files.current
    return {"current": current.name if current else None, "files": container.files.list_files()}


@router.delete("/assistant/file")
async def clear_file(container: ServiceContainer = Depends(get_container)):
    """Detach the session file"""
    container.files.clear()
    return {"success": True}
