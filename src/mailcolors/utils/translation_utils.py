#!/usr/bin/env python3
# -*- coding: utf-8 -*-
#
# translation_utils.py - Utilities for translation support
#
import gettext
import os

# Default for system install; MAILCOLORS_LOCALEDIR points at a bundled tree
locale_dir = os.environ.get("MAILCOLORS_LOCALEDIR", "/usr/share/locale")

# A private catalog keeps the host application's text domain untouched
_translation = gettext.translation("mailcolors", locale_dir, fallback=True)

# Export _ directly as the translation function
_ = _translation.gettext
