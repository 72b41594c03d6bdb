"""Reading glTF 2.0 documents, their buffers and their vertex and index data."""