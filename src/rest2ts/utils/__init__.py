# Copyright 2026 rest2ts Contributors
# SPDX-License-Identifier: Apache-2.0

"""Shared utilities."""
