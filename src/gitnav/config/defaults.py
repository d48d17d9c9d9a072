"""Starter .gitnav.toml template written by ``gitnav init``."""

DEFAULT_TOML = """\
# gitnav configuration
version = "1.0"

[output]
format = "terminal"       # terminal | json
show_header = true        # branch and parent commit above the file list

[cache]
# directory = "~/.cache/git-navigator"   # where numbered listings are stored
stale_check = "warn"      # off | warn | error (re-check selections before acting)
"""
