import pytest

from lzrender.shader_source import load_shader


def test_plain_file_keeps_lines_and_adds_final_newline(tmp_path):
    shader = tmp_path / "plain.frag"
    shader.write_text("void main() {\n}", encoding="utf-8")
    assert load_shader(shader) == "void main() {\n}\n"


def test_include_is_expanded_in_place(tmp_path):
    (tmp_path / "common.glsl").write_text("float common;\n", encoding="utf-8")
    main = tmp_path / "main.vert"
    main.write_text('#version 460\n#include "common.glsl"\nvoid main(){}\n', encoding="utf-8")
    assert load_shader(main) == "#version 460\nfloat common;\nvoid main(){}\n"


def test_include_is_relative_to_including_file(tmp_path):
    lib = tmp_path / "lib"
    lib.mkdir()
    (lib / "inner.glsl").write_text("inner\n", encoding="utf-8")
    (lib / "outer.glsl").write_text('#include "inner.glsl"\nouter\n', encoding="utf-8")
    main = tmp_path / "main.frag"
    main.write_text('#include "lib/outer.glsl"\nmain\n', encoding="utf-8")
    assert load_shader(str(main)) == "inner\nouter\nmain\n"


def test_include_of_empty_file_contributes_nothing(tmp_path):
    (tmp_path / "empty.glsl").write_text("", encoding="utf-8")
    main = tmp_path / "main.frag"
    main.write_text('a\n#include "empty.glsl"\nb\n', encoding="utf-8")
    assert load_shader(main) == "a\nb\n"


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_shader(tmp_path / "absent.vert")


def test_missing_include_raises(tmp_path):
    main = tmp_path / "main.frag"
    main.write_text('#include "absent.glsl"\n', encoding="utf-8")
    with pytest.raises(FileNotFoundError):
        load_shader(main)


def test_circular_include_raises(tmp_path):
    (tmp_path / "a.glsl").write_text('#include "b.glsl"\n', encoding="utf-8")
    (tmp_path / "b.glsl").write_text('#include "a.glsl"\n', encoding="utf-8")
    with pytest.raises(ValueError, match="circular"):
        load_shader(tmp_path / "a.glsl")


def test_malformed_include_raises(tmp_path):
    main = tmp_path / "main.frag"
    main.write_text("#include common.glsl\n", encoding="utf-8")
    with pytest.raises(ValueError, match="malformed"):
        load_shader(main)