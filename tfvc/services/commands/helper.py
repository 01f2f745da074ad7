import asyncio
import logging
import re
import xml.etree.ElementTree as ET
from typing import Any, Dict

from tfvc.core.exceptions import (
    AuthenticationFailedError,
    ExecutionFailedError,
    NotATfvcFolderError,
    XmlParseError,
    XmlPayloadNotFoundError,
)
from tfvc.schemas.command import ExecutionResult

logger = logging.getLogger(__name__)

_AUTHENTICATION_PATTERN = re.compile(r"TF30063|unauthorized|authentication failed", re.IGNORECASE)
_NOT_A_TFVC_FOLDER_PATTERN = re.compile(
    r"workspace could not be determined|unable to determine the workspace", re.IGNORECASE
)


class CommandHelper:
    """Helpers shared by all tf commands"""

    @staticmethod
    def process_errors(command: str, result: ExecutionResult) -> None:
        """Raise if the execution result reports a failure"""
        if not result.failed:
            return

        # tf sometimes writes the explanation to stdout and only sets the exit code
        details = result.stderr.strip() if result.stderr else result.stdout.strip()
        logger.debug(f"Command '{command}' failed with exit code {result.exit_code}")

        if _AUTHENTICATION_PATTERN.search(details):
            raise AuthenticationFailedError(command, details, result.exit_code)
        if _NOT_A_TFVC_FOLDER_PATTERN.search(details):
            raise NotATfvcFolderError(command, details, result.exit_code)
        raise ExecutionFailedError(command, details, result.exit_code)

    @staticmethod
    def trim_to_xml(text: str) -> str:
        """Drop any text printed before or after the XML document"""
        if text:
            start = text.find("<?xml")
            if start < 0:
                start = text.find("<")
            end = text.rfind(">")
            if 0 <= start < end:
                return text[start : end + 1]
        raise XmlPayloadNotFoundError("No XML payload found in command output")

    @staticmethod
    async def parse_xml(xml: str) -> Dict[str, Any]:
        """
        Parse XML text into nested dictionaries.

        The result maps the root tag to its node. A node holds its attributes
        under "$", its non-blank text under "_" and, for every child tag, the
        list of child nodes in document order.
        """
        try:
            root = await asyncio.to_thread(ET.fromstring, xml)
        except ET.ParseError as e:
            raise XmlParseError(f"Invalid XML in command output: {e}") from e
        return {root.tag: _element_to_node(root)}


def _element_to_node(element: ET.Element) -> Dict[str, Any]:
    node: Dict[str, Any] = {"$": dict(element.attrib)}
    text = (element.text or "").strip()
    if text:
        node["_"] = text
    for child in element:
        node.setdefault(child.tag, []).append(_element_to_node(child))
    return node
