from authclient.core.transport.http_client import TransportClient

__all__ = ["TransportClient"]
