"""Services"""
from .openai_service import OpenAIService
from .assessment_client import AssessmentClient

__all__ = ['OpenAIService', 'AssessmentClient']
