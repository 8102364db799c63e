"""
Vercel Python Function for plan tool execution.

This endpoint handles POST requests to /api/plan/tools and executes
the requested tool (calculate_time_difference or get_arrival_plan).
"""

from http.server import BaseHTTPRequestHandler
import json
import logging
import os
import sys
from pathlib import Path

# Add the _python directory to the Python path for importing jetlag module
sys.path.insert(0, str(Path(__file__).parent.parent / "_python"))

from jetlag.timezone import InvalidTimeZone
from plan_tools import InvalidRequest, invoke_tool

logger = logging.getLogger(__name__)

MAX_BODY_SIZE = int(os.environ.get("PLAN_MAX_BODY_SIZE", 64 * 1024))
KNOWN_TOOLS = ("calculate_time_difference", "get_arrival_plan")


class handler(BaseHTTPRequestHandler):
    """HTTP handler for Vercel Python Functions."""

    def do_POST(self):
        """Handle POST requests for tool execution."""
        try:
            # Check body size before reading (prevent memory exhaustion)
            content_length = int(self.headers.get("Content-Length", 0))
            if content_length > MAX_BODY_SIZE:
                self._send_json_response(413, {"error": "Request body too large"})
                return

            body = self.rfile.read(content_length)
            data = json.loads(body)

            tool_name = data.get("tool_name")
            arguments = data.get("arguments", {})

            if not tool_name:
                self._send_json_response(400, {"error": "Missing tool_name"})
                return

            if tool_name not in KNOWN_TOOLS:
                self._send_json_response(400, {"error": f"Unknown tool: {tool_name}"})
                return

            result = invoke_tool(tool_name, arguments)

            self._send_json_response(200, {"result": result})

        except json.JSONDecodeError:
            self._send_json_response(400, {"error": "Invalid JSON in request body"})
        except InvalidRequest as e:
            self._send_json_response(400, {"error": str(e)})
        except InvalidTimeZone as e:
            self._send_json_response(400, {"error": str(e)})
        except Exception as e:
            logger.exception("Tool execution failed")
            self._send_json_response(500, {"error": f"Tool execution failed: {str(e)}"})

    def _send_json_response(self, status_code: int, data: dict):
        """Send a JSON response with the given status code."""
        self.send_response(status_code)
        self.send_header("Content-Type", "application/json")
        self.send_header("Access-Control-Allow-Origin", "*")
        self.end_headers()
        self.wfile.write(json.dumps(data).encode())

    def do_OPTIONS(self):
        """Handle CORS preflight requests."""
        self.send_response(200)
        self.send_header("Access-Control-Allow-Origin", "*")
        self.send_header("Access-Control-Allow-Methods", "POST, OPTIONS")
        self.send_header("Access-Control-Allow-Headers", "Content-Type")
        self.end_headers()
