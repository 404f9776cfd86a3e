"""General helpers: value parsing, YAML reading, mount lookup and flag help lines."""