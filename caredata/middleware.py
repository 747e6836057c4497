class MethodOverrideMiddleware:
    """Let HTML forms send PUT/PATCH/DELETE by posting a ``_method`` field.

    Runs in ``process_view`` after CSRF validation so the token is still
    checked against the original POST.
    """
    ALLOWED_METHODS = ('PUT', 'PATCH', 'DELETE')
    FIELD = '_method'

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        return self.get_response(request)

    def process_view(self, request, view_func, view_args, view_kwargs):
        if request.method != 'POST':
            return None
        override = (request.POST.get(self.FIELD) or request.GET.get(self.FIELD) or '').upper()
        if override in self.ALLOWED_METHODS:
            request.method = override
        return None
