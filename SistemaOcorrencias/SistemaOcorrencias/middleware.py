import logging
import time

logger = logging.getLogger('django')


class RequestLogMiddleware:
    def __init__(self, get_response):
        self.get_response = get_response
        # Requisições cujo caminho contém algum destes termos não são registradas
        self.ignored_paths = [
            '/static/',
            '/media/',
            '/favicon.ico',
            '/api/ocorrencias/preview/',  # chamado a cada alteração do formulário
            'jsi18n',
        ]

    def __call__(self, request):
        start_time = time.time()

        response = self.get_response(request)

        duration = time.time() - start_time

        if not any(term in request.path for term in self.ignored_paths):
            user = getattr(request, 'user', None)
            user_id = user.username if user and user.is_authenticated else 'Anon'

            log_msg = f"[{request.method}] {request.path} | User: {user_id} | Status: {response.status_code} | {duration:.2f}s"

            if response.status_code >= 500:
                logger.error(log_msg)
            elif response.status_code >= 400:
                logger.warning(log_msg)
            else:
                logger.info(log_msg)

        return response
