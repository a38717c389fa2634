# -*- coding: utf-8 -*-

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from pytest import fixture

from lcsdiff.config import reset_config


@fixture(autouse=True)
def isolated_config(tmpdir, monkeypatch):
    """Run each test with config files only from a temporary directory."""
    config_dir = tmpdir.mkdir('jupyter_config')
    monkeypatch.setenv('JUPYTER_CONFIG_DIR', str(config_dir))
    monkeypatch.delenv('JUPYTER_CONFIG_PATH', raising=False)
    monkeypatch.chdir(str(tmpdir))
    reset_config()
    yield str(tmpdir)
    reset_config()


_sequence_pairs = [
    ([], []),
    ([1], [1]),
    ([1], [2]),
    ([1, 2], [1, 2]),
    ([2, 1], [1, 2]),
    ([1, 2, 3], [1, 2]),
    ([2, 1, 3], [1, 2]),
    ([1, 2], [1, 2, 3]),
    ([2, 1], [1, 2, 3]),
    ([1, 2], [1, 2, 1, 2]),
    ([1, 2, 1, 2], [1, 2]),
    ([1, 2, 3, 4, 1, 2], [3, 4, 2, 3]),
    ([None, 0, None], [0, None]),
    (list("abcab"), list("ayb")),
    (list("xaxcxabc"), list("abcy")),
    (list("XMJYAUZ"), list("MZJAWXU")),
    ]


@fixture(params=_sequence_pairs, ids=lambda p: "%r-%r" % p)
def sequence_pair(request):
    return request.param
