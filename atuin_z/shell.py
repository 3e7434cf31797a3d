"""Shell integration: `z` function templates for eval in rc files."""

from __future__ import annotations

from enum import Enum


class Shell(str, Enum):
    BASH = "bash"
    ZSH = "zsh"
    FISH = "fish"


_POSIX_TEMPLATE = """\
z() {
    if [ $# -eq 0 ]; then
        cd ~
        return
    fi

    case "$1" in
        -x)
            shift
            if [ $# -eq 0 ]; then
                atuin-z -x -- "$PWD"
            else
                atuin-z -x -- "$@"
            fi
            return
            ;;
        -l|-h|--help)
            ATUIN_Z_PWD="$PWD" atuin-z "$@"
            return
            ;;
    esac

    local result
    result="$(ATUIN_Z_PWD="$PWD" atuin-z "$@")"
    if [ -n "$result" ]; then
        cd "$result"
    fi
}
"""

_FISH_TEMPLATE = """\
function z
    if test (count $argv) -eq 0
        cd ~
        return
    end

    switch $argv[1]
        case -x
            set -e argv[1]
            if test (count $argv) -eq 0
                atuin-z -x -- $PWD
            else
                atuin-z -x -- $argv
            end
            return
        case -l -h --help
            ATUIN_Z_PWD=$PWD atuin-z $argv
            return
    end

    set -l result (ATUIN_Z_PWD=$PWD atuin-z $argv)
    if test -n "$result"
        cd $result
    end
end
"""

_TEMPLATES: dict[Shell, str] = {
    Shell.BASH: _POSIX_TEMPLATE,
    Shell.ZSH: _POSIX_TEMPLATE,
    Shell.FISH: _FISH_TEMPLATE,
}


def initScript(shell: Shell) -> str:
    """Return the `z` function definition for the given shell."""
    return _TEMPLATES[Shell(shell)]
