# default_commands.py

from .session.suggestions import CommandKnowledgeBase

DEFAULT_COMMANDS = [
    "cd", "pwd", "clear", "history", "exit", "help",
    "ls", "cat", "cp", "mv", "rm", "mkdir", "rmdir", "touch",
    "echo", "grep", "find", "head", "tail", "less", "wc", "sort",
    "git", "python", "pip", "make", "ssh", "curl", "tar", "chmod",
    "ps", "kill", "top", "df", "du", "which", "whoami", "date",
]

DEFAULT_FLAGS = {
    "ls": ["-l", "-a", "-la", "-lh", "-R", "-t", "-S", "--color"],
    "grep": ["-i", "-r", "-n", "-v", "-l", "-E", "-w", "--include"],
    "git": ["--version", "--help", "-C", "--no-pager"],
    "rm": ["-r", "-f", "-rf", "-i", "-v"],
    "cp": ["-r", "-i", "-v", "-p", "-a"],
    "mv": ["-i", "-f", "-v", "-n"],
    "mkdir": ["-p", "-v", "-m"],
    "find": ["-name", "-type", "-iname", "-maxdepth", "-mtime", "-size"],
    "head": ["-n", "-c"],
    "tail": ["-n", "-f", "-c"],
    "wc": ["-l", "-w", "-c", "-m"],
    "sort": ["-n", "-r", "-u", "-k", "-h"],
    "tar": ["-x", "-c", "-v", "-f", "-z", "-xzf", "-czf"],
    "chmod": ["-R", "-v"],
    "ps": ["-e", "-f", "-ef", "-aux"],
    "df": ["-h", "-T"],
    "du": ["-h", "-s", "-sh", "-d"],
    "python": ["-m", "-c", "-V", "-u"],
    "pip": ["--version", "--help"],
    "curl": ["-o", "-O", "-L", "-s", "-I", "-X", "-H", "-d"],
    "echo": ["-n", "-e"],
    "cat": ["-n", "-A"],
    "kill": ["-9", "-l", "-s"],
}

DEFAULT_KNOWLEDGE_BASE = CommandKnowledgeBase.create(DEFAULT_COMMANDS, DEFAULT_FLAGS)
