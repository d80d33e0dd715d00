from authclient.core.app.application_factory import ApiClient, build_api_client

__all__ = ["ApiClient", "build_api_client"]
