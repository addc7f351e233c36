import pygame
import pytest

pytest.importorskip("OpenGL.GL")

from glsketch.demos.artview.viewer import build_parser, main  # noqa: E402


def test_parser_defaults():
    args = build_parser().parse_args([])
    assert args.art == "batman"
    assert not args.no_debug
    assert args.export is None


def test_parser_rejects_unknown_art():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["mona_lisa"])


def test_export_without_window(tmp_path):
    out = tmp_path / "floral.png"
    main(["floral", "--export", str(out), "--size", "80"])
    assert out.is_file()
    assert pygame.image.load(str(out)).get_size() == (80, 80)


def test_bad_reference_exits_with_error(tmp_path):
    with pytest.raises(SystemExit) as exc:
        main(["cat", "--reference", str(tmp_path / "missing.png")])
    assert exc.value.code == 1
