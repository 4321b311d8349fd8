"""
Pydantic schemas for API request/response models
"""
from pydantic import BaseModel, Field
from typing import List, Optional

from models import DocumentFamily


class DocumentTypeResponse(BaseModel):
    """Response model for document type information"""
    key: DocumentFamily = Field(..., description="Document family identifier")
    name: str = Field(..., description="Human-readable document name")
    fields: List[str] = Field(default_factory=list, description="Fields extracted for this family")


class ClassifyRequest(BaseModel):
    """Request model for classification"""
    raw_text: str = Field(..., description="OCR text for one document")


class ClassificationResponse(BaseModel):
    """Response model for document classification"""
    document_type: DocumentFamily = Field(..., description="Detected document family")
    reason: str = Field(..., description="Rule that decided the classification")
    trade_license_score: int = Field(..., description="Weighted trade license evidence")


class ParseRequest(BaseModel):
    """Request model for parsing text as a known family"""
    raw_text: str = Field(..., description="OCR text for one document")
    document_type: DocumentFamily = Field(..., description="Family to parse the text as")


class ProcessRequest(BaseModel):
    """Request model for classify-then-parse"""
    raw_text: str = Field(..., description="OCR text for one document")
    document_type: Optional[DocumentFamily] = Field(
        None, description="Expected family; rejected if detection disagrees"
    )
    enhance: bool = Field(False, description="Clean the text with the LLM post-processor first")
