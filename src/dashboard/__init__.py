"""Interactive dashboard of differential expression results.

Modules:
    app: Shiny UI and server, rendering plots for the selected gene.
    config: Settings dataclass and command line parsing.
    main: Entry point, serving the app or exporting plots to files.
    references: Bibliographic references shown below the plots.
"""
