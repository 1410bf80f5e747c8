"""Small applications built on the runtime; each has a build_node() and a main()."""
