#!/usr/bin/env python3

# Copyright (C) 2022-2026 The ecfield developers
#
# This file is part of ecfield. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecfield including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Exception classes.

These are only meant to discriminate between Exceptions being raised
by ecfield from those raised by other codebase.

Users are usually better off just dealing with the regular
ValueError and TypeError from which the ecfield versions are derived.
"""


class ECFieldValueError(ValueError):
    pass


class ECFieldTypeError(TypeError):
    pass
