"""RFC 4122 UUID values, parsing, generation and database conversion."""