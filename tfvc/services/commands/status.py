import asyncio
import logging
import os
import stat
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from tfvc.core.exceptions import MalformedOutputError
from tfvc.schemas.changes import PendingChange
from tfvc.schemas.command import CommandMetadata, ExecutionResult
from tfvc.schemas.server_context import ServerContext
from tfvc.services.commands.argument_builder import ArgumentBuilder
from tfvc.services.commands.base import TfvcCommand
from tfvc.services.commands.helper import CommandHelper


class StatusCommand(TfvcCommand[List[PendingChange]]):
    """
    Returns the status of the workspace as a list of pending changes.

    Only part of the tf status syntax is supported:
    status [/workspace:<value>] [/shelveset:<value>] [/format:brief|detailed|xml]
           [/recursive] [/user:<value>] [/nodetect] [<itemSpec>...]
    """

    def __init__(
        self,
        server_context: Optional[ServerContext],
        ignore_folders: bool,
        local_paths: Optional[List[str]] = None,
    ):
        self.server_context = server_context
        self.ignore_folders = ignore_folders
        self.local_paths = local_paths
        self.logger = logging.getLogger(__name__)

    @property
    def metadata(self) -> CommandMetadata:
        return CommandMetadata(
            name="status",
            description="List the pending and candidate changes in the workspace",
            documentation="""
            Runs `tf status -format:xml -recursive` and returns pending changes
            followed by candidate changes.

            Arguments:
            - server_context: Collection URL and credentials (optional)
            - ignore_folders: Drop entries whose local item is a directory
            - local_paths: Restrict the status to these paths (optional)
            """,
        )

    def get_arguments(self) -> ArgumentBuilder:
        builder = (
            ArgumentBuilder("status", self.server_context)
            .add_switch_with_value("format", "xml")
            .add_switch("recursive")
        )
        for local_path in self.local_paths or []:
            builder.add(local_path)
        return builder

    async def parse_output(self, execution_result: ExecutionResult) -> List[PendingChange]:
        """
        Parse the xml output of the status command.

        <?xml version="1.0" encoding="utf-8"?>
        <status>
        <pending-changes>
        <pending-change server-item="$/tfsTest_03/Folder333/DemandEquals_renamed.java" version="217" owner="NORTHAMERICA\\jpricket" date="2017-02-08T11:12:06.766-0500" lock="none" change-type="rename" workspace="Folder1_00" source-item="$/tfsTest_03/Folder333/DemandEquals.java" computer="JPRICKET-DEV2" local-item="D:\\tmp\\tfsTest03_44\\Folder333\\DemandEquals_renamed.java" file-type="windows-1252"/>
        </pending-changes>
        <candidate-pending-changes>
        <pending-change server-item="$/tfsTest_01/test.txt" version="0" owner="jason" date="2016-07-13T12:36:51.060-0400" lock="none" change-type="add" workspace="MyNewWorkspace2" computer="JPRICKET-DEV2" local-item="D:\\tmp\\test\\test.txt"/>
        </candidate-pending-changes>
        </status>
        """
        CommandHelper.process_errors(self.get_arguments().to_string(), execution_result)

        xml = CommandHelper.trim_to_xml(execution_result.stdout)
        document = await CommandHelper.parse_xml(xml)
        status = document.get("status")
        if status is None:
            return []

        changes = [
            self._convert(record, is_candidate=False)
            for record in self._section(status, "pending-changes")
        ]
        changes.extend(
            self._convert(record, is_candidate=True)
            for record in self._section(status, "candidate-pending-changes")
        )
        self.logger.debug(f"tf status reported {len(changes)} change(s)")

        if not self.ignore_folders:
            return changes

        # Probe all local items at once; gather keeps the results in input order
        keep = await asyncio.gather(*(self._is_not_folder(change) for change in changes))
        return [change for change, kept in zip(changes, keep) if kept]

    @staticmethod
    def _section(status: Dict[str, Any], name: str) -> List[Dict[str, Any]]:
        """pending-change records of a section; a missing section has none"""
        records = []
        for section in status.get(name, []):
            records.extend(section.get("pending-change", []))
        return records

    @staticmethod
    def _convert(record: Dict[str, Any], is_candidate: bool) -> PendingChange:
        try:
            return PendingChange.model_validate(
                {**record.get("$", {}), "is_candidate": is_candidate}
            )
        except ValidationError as e:
            raise MalformedOutputError(f"Unexpected pending-change record: {e}") from e

    async def _is_not_folder(self, change: PendingChange) -> bool:
        # Deleted files won't exist, but we still include them in the results
        if not change.local_item:
            return True
        try:
            stats = await asyncio.to_thread(os.lstat, change.local_item)
        except (FileNotFoundError, NotADirectoryError):
            return True
        except OSError as e:
            self.logger.warning(
                f"Could not check whether {change.local_item} is a folder, keeping it: {e}"
            )
            return True
        return not stat.S_ISDIR(stats.st_mode)
