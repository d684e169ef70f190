"""Restaurant and menu-item extraction from rendered page text.

Usage::

    python -m harvest menu page.txt                  # Menu items from a text dump
    python -m harvest restaurants listing.html --html --area "Bandra West"
    python -m harvest restaurants listing.html --html --save
"""
