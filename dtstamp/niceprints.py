'''
niceprints
==========

This module provides functions which add visual flair to your text, to make
your print statements more interesting.

These functions only do the minimum amount of transformation for their effect.
You should do your uppercase/lowercase, text wrap, etc. before calling
these functions.
'''
import unicodedata

def unicode_width(text) -> int:
    '''
    Return the number of terminal columns the text will take up, counting
    wide east asian characters as two.
    '''
    return sum(2 if unicodedata.east_asian_width(c) in 'WF' else 1 for c in text)

def equals_header(text):
    '''
    Sample text
    ===========
    '''
    return text + '\n' + ('=' * unicode_width(text))

