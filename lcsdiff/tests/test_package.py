# -*- coding: utf-8 -*-

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.


def test_pkg_version():
    import lcsdiff
    from lcsdiff._version import version_info
    assert lcsdiff.__version__ == "%d.%d.%d" % version_info[:3]


def test_pkg_public_api():
    import lcsdiff
    for name in lcsdiff.__all__:
        assert hasattr(lcsdiff, name)


def test_pkg_imports_only_core_modules():
    # Importing lcsdiff only loads the diff core and its config
    import lcsdiff
    import sys
    loaded = set(name for name in sys.modules
                 if name.startswith('lcsdiff.') and not name.startswith('lcsdiff.tests'))
    assert loaded <= {
        'lcsdiff._version', 'lcsdiff.config', 'lcsdiff.edits', 'lcsdiff.log',
        'lcsdiff.diffing', 'lcsdiff.diffing.lcs', 'lcsdiff.diffing.putback',
        'lcsdiff.diffing.sequences',
    }


def test_traversal_shares_putback_sentinel():
    from lcsdiff.diffing import lcs, putback
    assert lcs.Missing is putback.Missing
