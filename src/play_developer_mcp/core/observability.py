"""MCP tool decorator with logging and timing.

Provides @mcp_tool, which logs each tool invocation with a request id,
its outcome and its duration.
"""

import functools
import logging
import time
from typing import Any, Callable, Optional, TypeVar
from uuid import uuid4

from mcp.types import CallToolResult

logger = logging.getLogger(__name__)

T = TypeVar("T")


def generate_request_id(prefix: str = "tool") -> str:
    return f"{prefix}_{uuid4().hex[:12]}"


def mcp_tool(tool_name: Optional[str] = None) -> Callable[[Callable[..., T]], Callable[..., T]]:
    """
    Decorator for async MCP tool handlers with observability.

    Automatically:
    - Logs tool invocations with a per-call request id
    - Logs success or error outcome (``isError`` results count as errors)
    - Logs latency in milliseconds

    Args:
        tool_name: Override tool name (defaults to function name)
    """

    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        name = tool_name or func.__name__

        @functools.wraps(func)
        async def async_wrapper(*args: Any, **kwargs: Any) -> T:
            request_id = generate_request_id()
            logger.debug(
                f"Tool {name} called",
                extra={"tool": name, "request_id": request_id, "arguments": sorted(kwargs)},
            )
            start = time.perf_counter()
            success = True
            try:
                result = await func(*args, **kwargs)  # type: ignore[misc]
                if isinstance(result, CallToolResult) and result.isError:
                    success = False
                return result
            except Exception:
                success = False
                raise
            finally:
                duration_ms = round((time.perf_counter() - start) * 1000, 2)
                logger.info(
                    f"Tool {name} {'succeeded' if success else 'failed'} in {duration_ms}ms",
                    extra={
                        "tool": name,
                        "request_id": request_id,
                        "success": success,
                        "duration_ms": duration_ms,
                    },
                )

        return async_wrapper  # type: ignore[return-value]

    return decorator
