class ApiError(Exception):
    # default status code if not overridden
    status_code = 500


class ProjectNotFoundError(ApiError):
    def __init__(self, msg="No such project", *args, **kwargs):
        super().__init__(msg, *args, **kwargs)
        self.status_code = 404


class ReleaseNotFoundError(ApiError):
    def __init__(self, msg="Project has no releases", *args, **kwargs):
        super().__init__(msg, *args, **kwargs)
        self.status_code = 404


class MetadataError(ApiError):
    def __init__(self, msg="Project metadata error", *args, **kwargs):
        super().__init__(msg, *args, **kwargs)
        self.status_code = 500


class BadgeRenderError(ApiError):
    def __init__(self, msg="Badge could not be rendered", *args, **kwargs):
        super().__init__(msg, *args, **kwargs)
        self.status_code = 500
