"""
Prompt templates for wdym.

Pure string builders: caller content is embedded as-is, no I/O.
"""

SHELL_PROMPT = """You are a command-line expert. Generate a shell command for the following request.

Operating System: {os}
Shell: {shell}

Request: {query}

Provide ONLY the shell command, no explanation or markdown formatting. The command should be safe to execute."""

CODE_PROMPT = """You are a coding expert. Generate code for the following request.

Request: {query}

Provide ONLY the code, no explanation or markdown formatting unless specifically requested."""

FILE_ANALYSIS_PROMPT = """You are a code and file analysis expert. Analyze the following file content and answer the question.

File Content:
{content}

Question: {query}

Provide a clear and concise answer."""

COMMAND_ANALYSIS_PROMPT = """You are a command-line expert. Analyze the following command and its output, then provide helpful insights, explanations, or suggestions.

Command: {command}
Output: {output}

Provide helpful insights about what this command does, any potential issues, or suggestions for next steps."""

EDIT_FILE_PROMPT = """You are a file editing expert. You need to modify the following file according to the given instruction.

File Path: {path}
Current Content:
{content}

Instruction: {instruction}

Provide the complete modified file content. If creating a new file, provide the full file content."""


def build_query_prompt(query: str) -> str:
    """Free-form queries go to the model verbatim."""
    return query


def build_shell_prompt(query: str, shell: str = "zsh", os_info: str = "macOS (Darwin)") -> str:
    return SHELL_PROMPT.format(os=os_info, shell=shell, query=query)


def build_code_prompt(query: str) -> str:
    return CODE_PROMPT.format(query=query)


def build_file_analysis_prompt(content: str, query: str) -> str:
    return FILE_ANALYSIS_PROMPT.format(content=content, query=query)


def build_command_analysis_prompt(command: str, output: str = "") -> str:
    return COMMAND_ANALYSIS_PROMPT.format(command=command, output=output)


def build_edit_file_prompt(path: str, content: str, instruction: str) -> str:
    """An empty content tells the model it is creating a new file."""
    return EDIT_FILE_PROMPT.format(path=path, content=content, instruction=instruction)
