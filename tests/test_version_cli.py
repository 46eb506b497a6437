import re

from test_cli_integration import run_cli


def test_cli_version_matches_package():
    proc = run_cli(["--version"])
    assert proc.returncode == 0
    out = (proc.stdout + proc.stderr).strip()
    # Expect something like: lice X.Y.Z
    m = re.match(r"lice\s+(\d+\.\d+\.\d+)", out)
    assert m, f"Unexpected version output: {out}"
    import lice
    assert m.group(1) == lice.__version__, f"CLI version {m.group(1)} != package {lice.__version__}"
