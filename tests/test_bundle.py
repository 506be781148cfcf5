import logging

import pytest

from sitebuild.bundle import build_bundle
from sitebuild.bundle import build_bundles
from sitebuild.minify import MinifierRegistry
from sitebuild.errors import MissingSourceError
from sitebuild.errors import TransformError
from sitebuild.errors import UnsupportedTypeError


def identity(content):
    return content


@pytest.fixture
def registry():
    return MinifierRegistry({"css": identity, "js": str.strip})


@pytest.fixture
def sources(tmp_path):
    (tmp_path / "a.css").write_text(".x{color:red}")
    (tmp_path / "b.css").write_text(".y{color:blue}")
    (tmp_path / "app.js").write_text("  var a = 1;\n")
    (tmp_path / "index.html").write_text("<p></p>")

    return tmp_path


def test_build_bundles(sources, registry):
    build_bundles({"dist/app.css": ["a.css", "b.css"]}, sources, registry=registry)

    assert (sources / "dist" / "app.css").read_text() == ".x{color:red}.y{color:blue}"


def test_build_bundles_keeps_declared_order(sources, registry):
    build_bundles({"dist/app.css": ["b.css", "a.css", "b.css"]}, sources, registry=registry)

    assert (sources / "dist" / "app.css").read_text() == ".y{color:blue}.x{color:red}.y{color:blue}"


def test_build_bundles_multiple_targets(sources, registry):
    build_bundles(
        {
            "dist/app.css": ["a.css"],
            "dist/app.js": ["app.js"],
            "dist/empty.css": [],
        },
        sources,
        registry=registry,
    )

    assert (sources / "dist" / "app.css").read_text() == ".x{color:red}"
    assert (sources / "dist" / "app.js").read_text() == "var a = 1;"
    assert (sources / "dist" / "empty.css").read_text() == ""


def test_build_bundles_absolute_paths(sources, registry, tmp_path_factory):
    output_dir = tmp_path_factory.mktemp("output")
    target = (output_dir / "site.css").as_posix()

    build_bundles({target: [(sources / "a.css").as_posix()]}, "/nonexistent", registry=registry)

    assert (output_dir / "site.css").read_text() == ".x{color:red}"


def test_build_bundles_default_registry(sources):
    (sources / "style.css").write_text(".x {\n  color: red\n}\n")

    build_bundles({"dist/style.min.css": ["style.css"]}, sources)

    assert (sources / "dist" / "style.min.css").read_text().strip() == ".x{color:red}"


def test_build_bundles_is_idempotent(sources, registry):
    bundles = {"dist/app.css": ["a.css", "b.css"], "dist/app.js": ["app.js"]}

    build_bundles(bundles, sources, registry=registry)
    first = (sources / "dist" / "app.css").read_bytes(), (sources / "dist" / "app.js").read_bytes()

    build_bundles(bundles, sources, registry=registry)
    second = (sources / "dist" / "app.css").read_bytes(), (sources / "dist" / "app.js").read_bytes()

    assert first == second


def test_build_bundles_missing_source(sources, registry):
    missing = (sources / "missing.css").as_posix()

    with pytest.raises(MissingSourceError, match=f"Source file `{missing}` does not exist") as exc_info:
        build_bundles({"dist/app.css": ["a.css", "missing.css"]}, sources, registry=registry)

    assert exc_info.value.path == missing


def test_build_bundles_directory_is_not_a_source(sources, registry):
    (sources / "styles.css").mkdir()

    with pytest.raises(MissingSourceError):
        build_bundles({"dist/app.css": ["styles.css"]}, sources, registry=registry)


def test_build_bundles_failure_leaves_target_truncated(sources, registry):
    target = sources / "dist" / "app.css"
    target.parent.mkdir()
    target.write_text("previously built content")

    with pytest.raises(MissingSourceError):
        build_bundles({"dist/app.css": ["missing.css", "a.css"]}, sources, registry=registry)

    assert target.read_text() == ""


def test_build_bundles_failure_keeps_already_appended_sources(sources, registry):
    with pytest.raises(MissingSourceError):
        build_bundles({"dist/app.css": ["a.css", "missing.css"]}, sources, registry=registry)

    assert (sources / "dist" / "app.css").read_text() == ".x{color:red}"


def test_build_bundles_unsupported_type_aborts_whole_build(sources, registry):
    bundles = {
        "dist/app.html": ["index.html"],
        "dist/app.css": ["a.css"],
    }

    with pytest.raises(UnsupportedTypeError, match="`html`") as exc_info:
        build_bundles(bundles, sources, registry=registry)

    assert exc_info.value.path == (sources / "index.html").as_posix()
    # Later targets are never reached
    assert not (sources / "dist" / "app.css").exists()


def test_build_bundles_transform_error(sources):
    def broken(content):
        raise ValueError("cannot parse")

    registry = MinifierRegistry({"css": broken})

    with pytest.raises(TransformError) as exc_info:
        build_bundles({"dist/app.css": ["a.css"]}, sources, registry=registry)

    assert exc_info.value.path == (sources / "a.css").as_posix()
    assert isinstance(exc_info.value.cause, ValueError)


def test_build_bundle_returns_target_path(sources, registry):
    target = build_bundle("dist/app.css", ["a.css"], sources, registry)

    assert target == (sources / "dist" / "app.css").as_posix()


def test_build_bundles_keeps_line_endings(tmp_path):
    (tmp_path / "crlf.css").write_bytes(b".x{}\r\n.y{}\r\n")
    (tmp_path / "cr.css").write_bytes(b".z{}\r")

    build_bundles({"dist/app.css": ["crlf.css", "cr.css"]}, tmp_path, registry=MinifierRegistry({"css": identity}))

    assert (tmp_path / "dist" / "app.css").read_bytes() == b".x{}\r\n.y{}\r\n.z{}\r"


def test_build_bundles_keeps_non_ascii_content(tmp_path):
    (tmp_path / "a.css").write_bytes('.x:after{content:"café"}\n'.encode("utf-8"))

    build_bundles({"dist/app.css": ["a.css"]}, tmp_path, registry=MinifierRegistry({"css": identity}))

    assert (tmp_path / "dist" / "app.css").read_bytes() == '.x:after{content:"café"}\n'.encode("utf-8")


def test_build_bundles_undecodable_source(sources, registry):
    (sources / "latin1.css").write_bytes(b"/* caf\xe9 */.x{}")

    with pytest.raises(TransformError) as exc_info:
        build_bundles({"dist/app.css": ["latin1.css"]}, sources, registry=registry)

    assert exc_info.value.path == (sources / "latin1.css").as_posix()
    assert isinstance(exc_info.value.cause, UnicodeDecodeError)


def test_build_bundles_escapes_paths_in_logs(sources, registry, propagate_logs, caplog):
    (sources / "app[x].css").write_text(".x{}")

    with caplog.at_level(logging.DEBUG, logger="sitebuild"):
        build_bundles({"dist/app[min].css": ["app[x].css"]}, sources, registry=registry)

    assert (sources / "dist" / "app[min].css").read_text() == ".x{}"
    assert any("app\\[x].css" in message for message in caplog.messages)
    assert any("app\\[min].css" in message for message in caplog.messages)
