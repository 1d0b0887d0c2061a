import os
from unittest.mock import patch

from simos.shell import Dispatcher


def test_prompt_tracks_current_directory(run, dispatcher):
    assert dispatcher.prompt == "simos:/> "
    run("mkdir /a/b")
    run("cd /a/b")
    assert dispatcher.prompt == "simos:/a/b> "


def test_empty_lines_are_ignored(dispatcher):
    assert dispatcher.handle_line("").output == ""
    assert dispatcher.handle_line("   \t ").output == ""
    assert dispatcher.running


def test_unknown_command(run):
    assert run("frobnicate now") == "Unknown command: frobnicate"
    assert run("FROB") == "Unknown command: frob"


def test_command_names_are_case_insensitive(run):
    run("MKDIR /Docs")
    assert run("Ls /") == "Contents of /:\nd Docs/"


def test_exit_and_quit_stop_the_session(ctx):
    for word in ("exit", "QUIT"):
        ctx.session.running = True
        dispatcher = Dispatcher(ctx)
        assert dispatcher.handle_line(word).output == "SiMOS terminated."
        assert not dispatcher.running


def test_unexpected_handler_failure_is_caught(run, rooted_fs):
    with patch.object(rooted_fs, "list_dir", side_effect=RuntimeError("boom")):
        assert run("ls /") == "Error executing command: boom"
    assert run("pwd") == "/"


# ---------- edit mode ----------
def test_edit_new_file(dispatcher, root_dir):
    intro = dispatcher.handle_line("edit /poem.txt").output
    assert intro.startswith("New file. Enter content below:")
    assert 'Type "EOF" on a new line to save and exit:' in intro
    assert dispatcher.ctx.session.editing
    assert dispatcher.prompt == "edit> "

    assert dispatcher.handle_line("first line").output == ""
    assert dispatcher.handle_line("ls").output == ""
    result = dispatcher.handle_line("EOF")

    assert result.output.startswith("File saved: /poem.txt")
    assert result.edit is not None and result.edit.saved
    assert not dispatcher.ctx.session.editing
    assert dispatcher.prompt == "simos:/> "
    with open(os.path.join(root_dir, "poem.txt"), encoding="utf-8") as f:
        assert f.read() == "first line\nls"


def test_commands_are_inert_while_editing(dispatcher, root_dir):
    dispatcher.handle_line("edit notes.txt")
    for line in ["exit", "rm /notes.txt", "mkdir /should-not-exist", "EOF more", " EOFX"]:
        assert dispatcher.handle_line(line).output == ""
        assert dispatcher.running
    dispatcher.handle_line("  EOF  ")

    assert not os.path.exists(os.path.join(root_dir, "should-not-exist"))
    with open(os.path.join(root_dir, "notes.txt"), encoding="utf-8") as f:
        assert f.read() == "exit\nrm /notes.txt\nmkdir /should-not-exist\nEOF more\n EOFX"


def test_edit_existing_file_appends_to_current_lines(run, dispatcher):
    run("create /log.txt one")
    intro = dispatcher.handle_line("edit /log.txt").output
    assert intro.startswith("Current content:\none")

    dispatcher.handle_line("two")
    outcome = dispatcher.handle_line("EOF").edit
    assert outcome.original == "one"
    assert outcome.content == "one\ntwo"
    assert run("show /log.txt") == "one\ntwo"


def test_edit_with_no_lines_writes_empty_file(run, dispatcher):
    dispatcher.handle_line("edit /blank.txt")
    dispatcher.handle_line("EOF")
    assert run("show /blank.txt") == "(empty file)"


def test_edit_creates_parent_directories(run, dispatcher, root_dir):
    dispatcher.handle_line("edit /new/dir/file.txt")
    assert os.path.isdir(os.path.join(root_dir, "new", "dir"))
    dispatcher.handle_line("EOF")


def test_edit_errors_do_not_enter_edit_mode(run, dispatcher):
    assert run("edit") == "Error: Missing file path. Usage: edit <path>"
    run("mkdir /folder")
    assert run("edit /folder") == "Error: Not a file: /folder"
    assert not dispatcher.ctx.session.editing


def test_failed_save_still_leaves_edit_mode(dispatcher, rooted_fs):
    dispatcher.handle_line("edit /locked.txt")
    dispatcher.handle_line("content")
    denied = PermissionError(13, "Permission denied")
    with patch.object(rooted_fs, "write_file", side_effect=denied):
        result = dispatcher.handle_line("EOF")

    assert result.output.startswith("Error: Failed to save file: Permission denied")
    assert not result.edit.saved
    assert not dispatcher.ctx.session.editing
    assert dispatcher.handle_line("pwd").output == "/"


def test_exit_is_honored_after_leaving_edit_mode(dispatcher):
    dispatcher.handle_line("edit /x.txt")
    dispatcher.handle_line("quit")
    assert dispatcher.running
    dispatcher.handle_line("EOF")
    assert dispatcher.handle_line("quit").output == "SiMOS terminated."
    assert not dispatcher.running
