from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from verdade.api.endpoints import audio, documents, fact_check, news, questions
from verdade.api.errors import INVALID_BODY_MESSAGE, error_response
from verdade.observability.logger import Stage, get_logger, setup_logging

setup_logging()
logger = get_logger(__name__, Stage.API_INTAKE)

app = FastAPI(
    title="Verdade na Lei BR API",
    description="Verificação de notícias e afirmações com base na legislação brasileira",
    version="1.0.0"
)

# browsers call every route straight from the web app, any origin is allowed
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def invalid_body_handler(request: Request, exc: RequestValidationError):
    logger.warning(f"invalid body on {request.url.path}: {exc.errors()[:3]}")
    return error_response(400, INVALID_BODY_MESSAGE)


app.include_router(news.router, prefix="/api", tags=["news"])
app.include_router(fact_check.router, prefix="/api", tags=["fact-check"])
app.include_router(documents.router, prefix="/api", tags=["documents"])
app.include_router(audio.router, prefix="/api", tags=["audio"])
app.include_router(questions.router, prefix="/api", tags=["questions"])


@app.get("/")
async def root():
    return {"message": "Verdade na Lei BR API", "version": "1.0.0"}


@app.get("/health")
async def health_check():
    return {"status": "healthy"}
