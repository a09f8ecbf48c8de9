import httpx
from brokenlinks.core.config import get as cfg_get

def client(timeout=30.0, verify=True, follow_redirects=True, max_connections=4, user_agent=None):
    """Build the client shared by every worker; ``httpx.Client`` is thread-safe."""
    return httpx.Client(
        timeout=timeout,
        verify=verify,
        follow_redirects=follow_redirects,
        headers={"User-Agent": user_agent or cfg_get("BROKENLINKS_USER_AGENT")},
        limits=httpx.Limits(
            max_connections=max_connections,
            max_keepalive_connections=max_connections,
        ),
    )
