"""
Textgridreader is a library for reading praat textgrid files.

Praat is a popular tool for working with transcribed speech data.
Praat's homepage: [http://www.fon.hum.uva.nl/praat/](http://www.fon.hum.uva.nl/praat/)

A textgrid holds time-aligned annotation tiers.  **textgrid_reader.py**
reads the long textgrid format one line at a time: the states it moves
through live in **sections.py**, and every field it reads is reported to a
TextgridListener (**listener.py**).  **builder.py** provides the listener
that assembles a TextgridFile -> NamedTier -> Entry tree (see
**data_classes/**); **printers.py** provides one that prints as it goes.

How the text of each entry is stored is up to the caller: pass any
function of one string to the reader.  **data_parsers.py** has a few.

    from textgridreader import textgrid_reader
    tgFile = textgrid_reader.openTextgrid("bobby.TextGrid")
    words = tgFile.getTier("words")
"""
