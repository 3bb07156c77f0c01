import uuid
import logging
import threading

from django.core.signals import request_finished

logger = logging.getLogger(__name__)

_thread_locals = threading.local()

class RequestIDFilter(logging.Filter):
    def filter(self, record):
        record.request_id = get_current_request_id()
        return True

class RequestIDMiddleware:
    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        request_id = request.headers.get('X-Request-ID') or str(uuid.uuid4())
        request.request_id = request_id
        _thread_locals.request_id = request_id

        response = self.get_response(request)
        response['X-Request-ID'] = request_id
        return response

def get_current_request_id():
    return getattr(_thread_locals, 'request_id', None) or 'no-id'

def clear_request_id(**kwargs):
    # django.request logs 4xx/5xx after the middleware chain has returned
    _thread_locals.request_id = None

request_finished.connect(clear_request_id, dispatch_uid="ideahub.middleware.clear_request_id")
