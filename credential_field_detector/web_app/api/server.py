from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel
from typing import Optional

from credential_field_detector.main import analyze_html, analyze_website
from credential_field_detector.utils.logger import logger

app = FastAPI(title="Credential Field Detector")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class DetectRequest(BaseModel):
    html: str
    url: Optional[str] = None


class UrlRequest(BaseModel):
    url: str
    headless: bool = True


@app.post("/detect")
async def detect(req: DetectRequest):
    try:
        analysis = analyze_html(req.html, url=req.url)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"Detection failed for markup: {e}")
        raise HTTPException(status_code=500, detail=str(e))
    return analysis.to_dict()


@app.post("/detect/url")
async def detect_url(req: UrlRequest):
    try:
        analysis = await analyze_website(req.url, headless=req.headless)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"Detection failed for {req.url}: {e}")
        raise HTTPException(status_code=500, detail=str(e))
    return analysis.to_dict()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
