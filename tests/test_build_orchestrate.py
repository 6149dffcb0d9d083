"""Tests for gnark_tooling.build.orchestrate (build-script pass)."""

import io
from pathlib import Path
from unittest.mock import MagicMock, patch

from gnark_tooling.config import ResolverConfig


def _fake_toolchain(calls: list[list[str]]):
    """subprocess.run stand-in: go build writes the library and header, bindgen writes bindings."""

    def run(cmd, **kwargs):
        calls.append(cmd)
        if cmd[0] == "go":
            dest = Path(cmd[cmd.index("-o") + 1])
            dest.write_bytes(b"lib")
            (dest.parent / "libgnark.h").write_text("int gnark_init(void);\n")
        elif cmd[0] == "bindgen":
            Path(cmd[cmd.index("-o") + 1]).write_text("// bindings\n")
        return MagicMock(returncode=0, stdout="", stderr="")

    return run


class TestRunPrebuilt:
    def test_copies_prebuilt_and_links_static(self, crate_dir: Path, out_dir: Path) -> None:
        from gnark_tooling.build import run_build

        target = "aarch64-apple-ios"
        pre = crate_dir / "prebuilt" / target
        pre.mkdir(parents=True)
        (pre / "libgnark.a").write_bytes(b"lib")
        (pre / "libgnark.h").write_text("")
        buf = io.StringIO()
        calls: list[list[str]] = []
        with patch("subprocess.run", side_effect=_fake_toolchain(calls)):
            rc = run_build(target, out_dir, crate_dir, config=ResolverConfig(), out=buf)
        assert rc == 0
        assert [c[0] for c in calls] == ["bindgen"]
        assert (out_dir / "libgnark.a").exists()
        lines = buf.getvalue().splitlines()
        assert lines[0] == "cargo:rerun-if-changed=go"
        assert f"cargo:rustc-link-search=native={out_dir.resolve()}" in lines
        assert "cargo:rustc-link-lib=static=gnark" in lines
        assert "cargo:rustc-link-lib=framework=Security" in lines
        assert not list(out_dir.glob("cc_wrapper_*"))

    def test_missing_prebuilt_file_fails(self, crate_dir: Path, out_dir: Path, capsys) -> None:
        from gnark_tooling.build import run_build

        target = "aarch64-linux-android"
        pre = crate_dir / "prebuilt" / target
        pre.mkdir(parents=True)
        (pre / "libgnark.h").write_text("")
        rc = run_build(target, out_dir, crate_dir, config=ResolverConfig(), out=io.StringIO())
        assert rc == 1
        _, err = capsys.readouterr()
        assert "prebuilt/aarch64-linux-android/libgnark.so not found" in err


class TestRunFromSource:
    def test_android_go_build_with_ndk(
        self, crate_dir: Path, out_dir: Path, fake_ndk: Path
    ) -> None:
        from gnark_tooling.build import run_build

        (crate_dir.parent / "go").mkdir()
        config = ResolverConfig(ndk_home=str(fake_ndk), host_os="linux")
        buf = io.StringIO()
        calls: list[list[str]] = []
        with patch("subprocess.run", side_effect=_fake_toolchain(calls)) as m:
            rc = run_build("aarch64-linux-android", out_dir, crate_dir, config=config, out=buf)
        assert rc == 0
        go_cmd = calls[0]
        assert "-buildmode=c-shared" in go_cmd
        assert go_cmd[go_cmd.index("-o") + 1] == str(out_dir.resolve() / "libgnark.so")
        env = m.call_args_list[0][1]["env"]
        assert env["GOOS"] == "android"
        assert env["GOARCH"] == "arm64"
        assert env["CC"].endswith("aarch64-linux-android21-clang")
        assert calls[1][0] == "bindgen"
        out = buf.getvalue()
        assert "cargo:rustc-link-lib=dylib=gnark" in out
        assert "cargo:rustc-link-lib=log" in out
        assert "cargo:warning" not in out

    def test_android_without_ndk_warns_to_cargo(self, crate_dir: Path, out_dir: Path) -> None:
        from gnark_tooling.build import run_build

        (crate_dir.parent / "go").mkdir()
        buf = io.StringIO()
        calls: list[list[str]] = []
        with (
            patch.dict("os.environ", {"PATH": "/usr/bin"}, clear=True),
            patch("subprocess.run", side_effect=_fake_toolchain(calls)) as m,
        ):
            rc = run_build(
                "x86_64-linux-android", out_dir, crate_dir, config=ResolverConfig(), out=buf
            )
        assert rc == 0
        assert "CC" not in m.call_args_list[0][1]["env"]
        assert "cargo:warning=Android NDK not configured" in buf.getvalue()

    def test_unknown_target_native_build(self, crate_dir: Path, out_dir: Path) -> None:
        from gnark_tooling.build import run_build

        (crate_dir.parent / "go").mkdir()
        buf = io.StringIO()
        calls: list[list[str]] = []
        env_clean = {"PATH": "/usr/bin"}
        with (
            patch.dict("os.environ", env_clean, clear=True),
            patch("subprocess.run", side_effect=_fake_toolchain(calls)) as m,
        ):
            rc = run_build(
                "x86_64-unknown-linux-musl", out_dir, crate_dir, config=ResolverConfig(), out=buf
            )
        assert rc == 0
        assert "-buildmode=c-archive" in calls[0]
        assert m.call_args_list[0][1]["env"] == {"PATH": "/usr/bin", "CGO_ENABLED": "1"}
        lines = buf.getvalue().splitlines()
        assert lines[-3:] == [
            "cargo:rustc-link-lib=static=gnark",
            "cargo:rustc-link-lib=pthread",
            "cargo:rustc-link-lib=resolv",
        ]

    def test_go_failure_is_fatal(self, crate_dir: Path, out_dir: Path, capsys) -> None:
        from gnark_tooling.build import run_build

        (crate_dir.parent / "go").mkdir()
        with patch("subprocess.run", return_value=MagicMock(returncode=1)):
            rc = run_build(
                "x86_64-apple-darwin",
                out_dir,
                crate_dir,
                config=ResolverConfig(),
                out=io.StringIO(),
            )
        assert rc == 1
        _, err = capsys.readouterr()
        assert "Go build failed with status: 1" in err


class TestRunNoSources:
    def test_neither_prebuilt_nor_go(self, crate_dir: Path, out_dir: Path, capsys) -> None:
        from gnark_tooling.build import run_build

        rc = run_build(
            "aarch64-apple-darwin", out_dir, crate_dir, config=ResolverConfig(), out=io.StringIO()
        )
        assert rc == 1
        _, err = capsys.readouterr()
        assert "Neither prebuilt/aarch64-apple-darwin nor ../go directory found" in err

    def test_prebuilt_wins_over_go(self, crate_dir: Path, out_dir: Path) -> None:
        from gnark_tooling.build import run_build

        (crate_dir.parent / "go").mkdir()
        pre = crate_dir / "prebuilt" / "x86_64-unknown-linux-gnu"
        pre.mkdir(parents=True)
        (pre / "libgnark.a").write_bytes(b"lib")
        (pre / "libgnark.h").write_text("")
        calls: list[list[str]] = []
        with patch("subprocess.run", side_effect=_fake_toolchain(calls)):
            rc = run_build(
                "x86_64-unknown-linux-gnu",
                out_dir,
                crate_dir,
                config=ResolverConfig(),
                out=io.StringIO(),
            )
        assert rc == 0
        assert [c[0] for c in calls] == ["bindgen"]


class TestLayoutOverride:
    def test_custom_layout_names(self, crate_dir: Path, out_dir: Path) -> None:
        from gnark_tooling.build import run_build

        pre = crate_dir / "bundled" / "x86_64-apple-darwin"
        pre.mkdir(parents=True)
        (pre / "libother.a").write_bytes(b"lib")
        (pre / "libgnark.h").write_text("")
        buf = io.StringIO()
        calls: list[list[str]] = []
        with patch("subprocess.run", side_effect=_fake_toolchain(calls)):
            rc = run_build(
                "x86_64-apple-darwin",
                out_dir,
                crate_dir,
                config=ResolverConfig(),
                layout={"prebuilt_dir": "bundled", "lib_base_name": "libother", "link_name": "other"},
                out=buf,
            )
        assert rc == 0
        assert (out_dir / "libother.a").exists()
        assert "cargo:rustc-link-lib=static=other" in buf.getvalue()
