"""
Vercel Python Function for arrival-day plan generation.

This endpoint handles POST requests to /api/plan/generate and returns
the first-night jet lag plan for the provided trip parameters.
"""

from http.server import BaseHTTPRequestHandler
import json
import logging
import os
import sys
from pathlib import Path
from uuid import uuid4

# Add the _python directory to the Python path for importing jetlag module
sys.path.insert(0, str(Path(__file__).parent.parent / "_python"))

from jetlag.timezone import InvalidTimeZone
from plan_tools import get_arrival_plan, validate_request

logger = logging.getLogger(__name__)

MAX_BODY_SIZE = int(os.environ.get("PLAN_MAX_BODY_SIZE", 64 * 1024))


class handler(BaseHTTPRequestHandler):
    """HTTP handler for Vercel Python Functions."""

    def do_POST(self):
        """Handle POST requests for plan generation."""
        try:
            content_length = int(self.headers.get("Content-Length", 0))
            if content_length > MAX_BODY_SIZE:
                self._send_json_response(413, {"error": "Request body too large"})
                return

            body = self.rfile.read(content_length)
            data = json.loads(body)

            validation_error = validate_request(data)
            if validation_error:
                self._send_json_response(400, {"error": validation_error})
                return

            result = get_arrival_plan(data)
            result["id"] = str(uuid4())

            self._send_json_response(200, result)

        except json.JSONDecodeError:
            self._send_json_response(400, {"error": "Invalid JSON in request body"})
        except InvalidTimeZone as e:
            self._send_json_response(400, {"error": str(e)})
        except Exception as e:
            logger.exception("Plan generation failed")
            self._send_json_response(500, {"error": f"Plan generation failed: {str(e)}"})

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
