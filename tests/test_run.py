import pytest
import yaml

import run


def test_headless_report(tmp_path, capsys):
    path = tmp_path / "scene.yaml"
    path.write_text(yaml.dump({
        'window_size': [100, 100],
        'shapes': [
            {'name': 'a', 'type': 'line', 'p1': [0, 0], 'p2': [10, 0]},
            {'name': 'b', 'type': 'line', 'p1': [5, -5], 'p2': [5, 5]},
        ],
    }))
    assert run.main(['--scene', str(path), '--no-render']) == 0
    out = capsys.readouterr().out
    assert "a x b: (5.00, 0.00)" in out


def test_missing_scene(tmp_path, capsys):
    assert run.main(['--scene', str(tmp_path / "missing.yaml"), '--no-render']) == 1
    assert "Error loading scene" in capsys.readouterr().out


@pytest.mark.parametrize("text", [
    "shapes: [unclosed\n",
    "- 1\n- 2\n",
    "sensors: [5]\n",
])
def test_malformed_scene_exits_with_error(tmp_path, capsys, text):
    path = tmp_path / "bad.yaml"
    path.write_text(text)
    assert run.main(['--scene', str(path), '--no-render']) == 1
    assert "Error loading scene" in capsys.readouterr().out


def test_dump_writes_resolved_scene(tmp_path):
    path = tmp_path / "scene.yaml"
    path.write_text(yaml.dump({'shapes': [{'type': 'circle', 'pos': [1, 1], 'radius': 2}]}))
    out = tmp_path / "out.yaml"
    assert run.main(['--scene', str(path), '--no-render', '--dump', str(out)]) == 0
    dumped = yaml.safe_load(out.read_text())
    assert dumped['shapes'] == [{'type': 'circle', 'name': 'circle0', 'pos': [1.0, 1.0], 'radius': 2.0}]
