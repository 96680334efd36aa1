from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
import logging

from logidesk.container import ServiceContainer
from logidesk.errors import ProviderError, ValidationError
from logidesk.models.assistant import FileAnalysisRequest, FileAnalysisResponse
from logidesk.services.file_analysis import analyze_file

from .deps import get_container

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["file-analysis"])


@router.post("/analyze-file", response_model=FileAnalysisResponse)
async def analyze_file_endpoint(request: FileAnalysisRequest, container: ServiceContainer = Depends(get_container)):
    """Analyze an uploaded file or answer a question about it"""
    try:
        analysis = await analyze_file(
            request,
            llm_service=container.analysis_llm,
            max_content_chars=container.settings.max_content_chars,
        )
    except ValidationError as e:
        return JSONResponse(status_code=400, content={"success": False, "error": str(e)})
    except ProviderError as e:
        logger.error(f"Error in analyze-file: {e.message}")
        return JSONResponse(status_code=500, content={"success": False, "error": e.message})

    return {"success": True, "analysis": analysis}
