"""
portuguese error messages and JSON error responses shared by the endpoints.

the news endpoints always answer {"success": false, "error": ...}; the
analysis endpoints answer client errors (4xx) as a bare {"error": ...} and
keep the success flag for server errors.
"""

from fastapi.responses import JSONResponse

from verdade.ai.gateway import GatewayError


INVALID_BODY_MESSAGE = "Corpo da requisição inválido"
NOT_CONFIGURED_MESSAGE = "Serviço de verificação não configurado"
RATE_LIMITED_MESSAGE = "Limite de requisições excedido. Tente novamente em alguns segundos."
OUT_OF_CREDITS_MESSAGE = "Créditos de IA insuficientes. Adicione créditos ao workspace."
GATEWAY_FAILURE_MESSAGE = "Erro ao consultar o serviço de IA. Tente novamente em instantes."
UNEXPECTED_ERROR_MESSAGE = "Erro interno ao processar a solicitação."
FEED_FAILURE_MESSAGE = "Erro ao buscar notícias."


def error_response(status_code: int, message: str, *, bare_client_errors: bool = False) -> JSONResponse:
    """
    build a JSON error response.

    args:
        status_code: HTTP status to answer with
        message: portuguese message for the user
        bare_client_errors: answer 4xx without the success flag

    returns:
        JSONResponse with the error body
    """
    if bare_client_errors and status_code < 500:
        body = {"error": message}
    else:
        body = {"success": False, "error": message}
    return JSONResponse(status_code=status_code, content=body)


def gateway_error_response(error: GatewayError, *, bare_client_errors: bool = False) -> JSONResponse:
    """pass 429 and 402 through, everything else becomes a 500"""
    if error.rate_limited:
        return error_response(429, RATE_LIMITED_MESSAGE, bare_client_errors=bare_client_errors)
    if error.out_of_credits:
        return error_response(402, OUT_OF_CREDITS_MESSAGE, bare_client_errors=bare_client_errors)
    return error_response(500, GATEWAY_FAILURE_MESSAGE)
