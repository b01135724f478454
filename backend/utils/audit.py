import logging

logger = logging.getLogger("audit")

def write_log(*, username, action, resource, status="SUCCESS", ip=None, meta=None):
    logger.info(
        "%s %s status=%s user=%s ip=%s meta=%s",
        action, resource, status, username, ip, meta or {},
    )

def client_ip(request):
    return request.client.host if request and request.client else None
