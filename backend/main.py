"""
FastAPI application - UAE document classification and field extraction
"""
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from typing import List
from contextlib import asynccontextmanager
import logging
import os

from config import DOCUMENT_TYPES, get_enhancement_settings
from document_classifier import DocumentClassifier
from document_parser import DocumentParser
from document_service import DocumentService
from exceptions import ArgumentError, DocumentTypeMismatchError, UnsupportedFamilyError
from models import DocumentFamily, ParseResult
from schemas import (
    ClassificationResponse, ClassifyRequest, DocumentTypeResponse,
    ParseRequest, ProcessRequest
)
from text_enhancer import GPT4AllTextEnhancer
from dotenv import load_dotenv

load_dotenv()

logging.basicConfig(
    level=getattr(logging, os.getenv("LOG_LEVEL", "INFO").upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown events"""
    logger.info("Document classifier ready")
    if enhancer is not None:
        if enhancer.is_server_available():
            logger.info(f"GPT4All enhancement enabled ({enhancer.base_url})")
        else:
            logger.warning(f"GPT4All server not reachable at {enhancer.base_url}; OCR text will be used as-is")
    yield


app = FastAPI(
    title="UAE Document Extraction API",
    description="Classifies OCR text and extracts passport, Emirates ID and trade license fields",
    version="1.0.0",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

classifier = DocumentClassifier()
parser = DocumentParser()

enhancement_settings = get_enhancement_settings()
enhancer = GPT4AllTextEnhancer(enhancement_settings) if enhancement_settings.enabled else None

service = DocumentService(classifier=classifier, parser=parser, enhancer=enhancer)


@app.get("/")
async def root():
    """Health check endpoint"""
    return {
        "status": "ok",
        "message": "UAE Document Extraction API is running",
        "version": "1.0.0"
    }


@app.get("/api/document-types", response_model=List[DocumentTypeResponse])
async def get_document_types():
    """Get all supported document families"""
    return [
        DocumentTypeResponse(
            key=family,
            name=DOCUMENT_TYPES[family.value]["name"],
            fields=DOCUMENT_TYPES[family.value]["fields"]
        )
        for family in DocumentFamily
    ]


@app.post("/api/classify", response_model=ClassificationResponse)
def classify_document(request: ClassifyRequest):
    """Detect the document family of OCR text"""
    try:
        result = classifier.explain(request.raw_text)
    except ArgumentError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return ClassificationResponse(
        document_type=result.family,
        reason=result.reason,
        trade_license_score=result.trade_license_score
    )


@app.post("/api/parse", response_model=ParseResult)
def parse_document(request: ParseRequest):
    """
    Extract fields from OCR text as the given family.
    Extraction failures come back with is_valid=false and a list of errors.
    """
    return parser.parse(request.raw_text, request.document_type)


@app.post("/api/process", response_model=ParseResult)
def process_document(request: ProcessRequest):
    """
    Classify OCR text, check it against the expected family (if given) and parse it
    """
    try:
        return service.process(request.raw_text, request.document_type, enhance=request.enhance)
    except (ArgumentError, UnsupportedFamilyError, DocumentTypeMismatchError) as e:
        logger.warning(f"Rejected processing request: {e}")
        raise HTTPException(status_code=400, detail=str(e))


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=True)
