"""Customer inquiry module."""

from bond_pipeline.inquiry.connector import InquiryConnector
from bond_pipeline.inquiry.service import InquiryService

__all__ = [
    "InquiryConnector",
    "InquiryService",
]
