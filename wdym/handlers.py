"""
Mode handlers.

Each handler takes the AI client and the run's Settings, validates its
inputs before calling the client, and prints the result.
"""

import logging

from . import config_file, prompts
from .config import Settings
from .diff import print_diff
from .errors import ExecutionError, UsageError
from .executor import execute_command
from .files import file_exists, read_file, write_file
from .history import get_last_command
from .terminal import colorize, confirm_action, get_shell_info, print_block, RULE, truncate_string

logger = logging.getLogger(__name__)

DEFAULT_FILE_QUESTION = "What does this file do?"


async def handle_shell(ai, settings: Settings) -> None:
    """Generate a shell command and offer to run it."""
    query = settings.query
    if not query:
        raise UsageError("no query provided for shell mode")

    shell, os_info = get_shell_info()
    print(f"🐚 {colorize('Generating shell command...', 'blue')} ({shell} on {os_info})")

    command = (await ai.generate_shell_command(query, shell=shell, os_info=os_info)).strip()
    print(f"\n{colorize('$', 'green')} {colorize(command, 'white')}")

    if not confirm_action("Execute this command?"):
        return

    print(f"\n{colorize('Executing...', 'yellow')}")
    try:
        output = execute_command(command)
    except ExecutionError as e:
        print(f"{colorize('❌', 'red')} Command failed: {e}")
        output = e.output
    if output:
        print(f"\n{output}")


async def handle_write(ai, settings: Settings) -> None:
    """Create or edit a file with AI-generated content."""
    file_path, instruction = settings.file_path, settings.query
    if not file_path:
        raise UsageError("no file path provided for write mode")
    if not instruction:
        raise UsageError("no instruction provided for write mode")

    print(f"✏️  {colorize('Processing file:', 'blue')} {file_path}")

    is_new_file = not file_exists(file_path)
    old_content = "" if is_new_file else read_file(file_path)

    print(f"📝 {colorize('Generating content...', 'blue')}")
    new_content = (await ai.edit_file(file_path, old_content, instruction)).strip()

    if is_new_file:
        preview_chars = config_file.get("preview_chars")
        print(f"\n📄 {colorize('New file content:', 'green')}")
        print(RULE)
        print(truncate_string(new_content, preview_chars))
        if len(new_content) > preview_chars:
            print("... (truncated, full content will be written to file)")
        print(RULE)
    else:
        print_diff(file_path, old_content, new_content, config_file.get("diff_lines"))

    action = "Create" if is_new_file else "Update"
    if confirm_action(f"{action} file {file_path}?"):
        write_file(file_path, new_content)
        print(f"✅ {colorize('File saved:', 'green')} {file_path}")
    else:
        print(f"❌ {colorize('Operation cancelled', 'red')}")


async def handle_code(ai, settings: Settings) -> None:
    if not settings.query:
        raise UsageError("no query provided for code mode")

    print(f"💻 {colorize('Generating code...', 'blue')}")
    code = (await ai.generate_code(settings.query)).strip()
    print_block("Generated code:", code)


async def handle_file_query(ai, settings: Settings) -> None:
    """Answer a question about a file."""
    file_path = settings.file_path
    if not file_path:
        raise UsageError("no file path provided")
    query = settings.query or DEFAULT_FILE_QUESTION

    print(f"📄 {colorize('Reading file:', 'blue')} {file_path}")
    content = read_file(file_path)

    print(f"🤔 {colorize('Analyzing file...', 'blue')}")
    response = (await ai.analyze_file(content, query)).strip()
    print_block("Analysis:", response)


async def handle_query(ai, settings: Settings) -> None:
    if not settings.query:
        raise UsageError("no query provided")

    print(f"🤔 {colorize('Processing query...', 'blue')}")
    response = (await ai.generate_response(prompts.build_query_prompt(settings.query))).strip()
    print_block("Response:", response)


async def handle_last_command(ai, settings: Settings) -> None:
    """Explain the most recent command from shell history."""
    print(f"🔍 {colorize('Finding your last command...', 'blue')}")
    last_cmd = get_last_command()
    print(f"📝 {colorize('Last command:', 'cyan')} {colorize(last_cmd, 'white')}")

    # The command's output is not available from history; only the command
    # itself is analysed.
    print(f"🤔 {colorize('Analyzing command...', 'blue')}")
    response = (await ai.analyze_command(last_cmd, "")).strip()
    print_block("Analysis:", response)
