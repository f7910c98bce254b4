from . import audio, documents, fact_check, news, questions

__all__ = ["audio", "documents", "fact_check", "news", "questions"]
