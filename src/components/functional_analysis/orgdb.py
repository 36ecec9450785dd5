import logging
from typing import Any, Optional

import rpy2.robjects as ro
from rpy2.rinterface_lib.embedded import RRuntimeError
from rpy2.robjects.packages import importr, isinstalled

double_brackets = ro.r("function(obj, idx){return(obj[[idx]])}")


class OrgDB:
    """
    OrgDB (Organism Database) class for accessing Bioconductor organism-specific annotation packages.

    The database is taken from the installed organism package (e.g. org.Hs.eg.db)
    when available. Otherwise, Bioconductor's AnnotationHub is queried for the
    species.

    Attributes:
        species (str): The species name to use for querying the AnnotationHub.
            Default is "Homo sapiens".
        package (str): Name of the organism annotation package.
            Default is "org.Hs.eg.db".

    Examples:
        >>> from components.functional_analysis.orgdb import OrgDB
        >>> org_db = OrgDB(species="Homo sapiens", package="org.Hs.eg.db")
        >>> # Access the database object
        >>> db = org_db.db
    """

    def __init__(
        self, species: str = "Homo sapiens", package: Optional[str] = "org.Hs.eg.db"
    ) -> None:
        self.species = species
        self.package = package
        self._db = None

    @property
    def db(self) -> Any:
        """
        Access the organism-specific annotation database.

        The database is loaded on first access and reused afterwards.

        Returns:
            An R object representing the organism database.
        """
        if self._db is None:
            if self.package and isinstalled(self.package):
                self._db = self._from_package()
            else:
                logging.warning(
                    f"Package {self.package} is not installed, "
                    f"querying AnnotationHub for {self.species}."
                )
                self._db = self._from_annotation_hub()
        return self._db

    def _from_package(self) -> Any:
        importr(self.package)
        return ro.r(f"{self.package}::{self.package}")

    def _from_annotation_hub(self) -> Any:
        r_annotation_hub = importr("AnnotationHub")
        try:
            anno_hub = ro.r("function(){suppressMessages(AnnotationHub())}")()
        except RRuntimeError as e:
            logging.warning(e)
            anno_hub = ro.r(
                "function(){suppressMessages(AnnotationHub(localHub=TRUE))}"
            )()

        return double_brackets(
            anno_hub,
            r_annotation_hub.query(
                anno_hub, ro.StrVector((self.species, "^org.*"))
            ).names[0],
        )
