from pathlib import Path

from fastapi import APIRouter, status
from fastapi.responses import FileResponse, JSONResponse


def build_client_router(build_dir: str) -> APIRouter:
    """
    Serve a built single-page client.

    Files that exist in ``build_dir`` are returned as is; any other non-API
    path falls back to ``index.html`` so client-side routing works.

    Args:
        build_dir: Directory containing the client build and its index.html
    """
    root = Path(build_dir).resolve()
    index = root / "index.html"
    client_router = APIRouter(tags=["client"], include_in_schema=False)

    @client_router.get("/{full_path:path}")
    async def serve_client(full_path: str):
        if full_path == "api" or full_path.startswith("api/"):
            return JSONResponse(content={"error": "Not found"}, status_code=status.HTTP_404_NOT_FOUND)

        candidate = (root / full_path).resolve()
        if full_path and candidate.is_file() and candidate.is_relative_to(root):
            return FileResponse(path=candidate)
        return FileResponse(path=index)

    return client_router
