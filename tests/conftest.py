from typing import Callable

import pytest

from tfvc.schemas.command import ExecutionResult
from tfvc.schemas.server_context import ServerContext

STATUS_XML_TEMPLATE = """<?xml version="1.0" encoding="utf-8"?>
<status>
<pending-changes>
<pending-change server-item="$/tfsTest_03/Folder333/DemandEquals_renamed.java" version="217" owner="NORTHAMERICA\\jpricket" date="2017-02-08T11:12:06.766-0500" lock="none" change-type="rename" workspace="Folder1_00" source-item="$/tfsTest_03/Folder333/DemandEquals.java" computer="JPRICKET-DEV2" local-item="{renamed}" file-type="windows-1252"/>
</pending-changes>
<candidate-pending-changes>
<pending-change server-item="$/tfsTest_01/test.txt" version="0" owner="jason" date="2016-07-13T12:36:51.060-0400" lock="none" change-type="add" workspace="MyNewWorkspace2" computer="JPRICKET-DEV2" local-item="{candidate}"/>
</candidate-pending-changes>
</status>
"""


@pytest.fixture
def status_xml() -> Callable[..., str]:
    """Sample `tf status -format:xml` output with one pending and one candidate change"""
    def _status_xml(
        renamed: str = "/tmp/a/DemandEquals_renamed.java",
        candidate: str = "/tmp/b/test.txt",
    ) -> str:
        return STATUS_XML_TEMPLATE.format(renamed=renamed, candidate=candidate)

    return _status_xml


@pytest.fixture
def make_result() -> Callable[..., ExecutionResult]:
    def _make_result(stdout: str = "", stderr: str = "", exit_code: int = 0) -> ExecutionResult:
        return ExecutionResult(exit_code=exit_code, stdout=stdout, stderr=stderr)

    return _make_result


@pytest.fixture
def server_context() -> ServerContext:
    return ServerContext(
        collection_url="https://tfs.example.com/tfs/DefaultCollection",
        username="jason",
        password="s3cret",
    )
