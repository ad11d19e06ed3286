"""Example command-line tools built on swcli: a line-processing tool and a version-only tool."""