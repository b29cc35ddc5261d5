"""Tables, chunks, value, dictionary and reference segments, and the table registry."""