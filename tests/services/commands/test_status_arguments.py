from tfvc.services.commands.status import StatusCommand


def test_get_arguments_forces_xml_and_recursive():
    command = StatusCommand(None, False)

    assert command.get_arguments().get_arguments() == [
        "status",
        "-noprompt",
        "-format:xml",
        "-recursive",
    ]


def test_get_arguments_appends_local_paths_in_order():
    paths = ["/work/b dir/file.txt", "/work/a", "relative\\path"]
    command = StatusCommand(None, False, paths)

    arguments = command.get_arguments().get_arguments()

    assert arguments[-3:] == paths
    assert "-format:xml" in arguments
    assert "-recursive" in arguments


def test_get_arguments_with_empty_paths_has_no_positionals():
    command = StatusCommand(None, False, [])

    assert command.get_arguments().get_arguments()[-1] == "-recursive"


def test_get_arguments_includes_collection(server_context):
    command = StatusCommand(server_context, False)

    arguments = command.get_arguments().get_arguments()

    assert f"-collection:{server_context.collection_url}" in arguments
    assert "-login:jason,s3cret" in arguments


def test_get_options_is_empty():
    assert StatusCommand(None, False).get_options() == {}


def test_metadata_name():
    assert StatusCommand(None, False).metadata.name == "status"
