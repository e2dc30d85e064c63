"""Session de regroupement : catalogue, opérations et exécution."""

from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from loguru import logger

from clipgroup.filesystem.discovery import build_catalog, media_directory
from clipgroup.filesystem.file_ops import prepare_output_directory
from clipgroup.mapping.executor import ExecutionReport, execute_operations
from clipgroup.mapping.strategies import group_by_day, prompt_for_operations
from clipgroup.mapping.validator import ValidationResult, ensure_valid, validate_operations
from clipgroup.models.media import MediaCatalog
from clipgroup.models.operation import MapOp, OperationKind
from clipgroup.ui.prompts import LineSource


class Mapper:
    """
    Regroupe les clips d'une carte mémoire dans des dossiers nommés.

    Le catalogue est construit une seule fois, les opérations s'ajoutent
    via une des stratégies puis sont validées avant toute écriture.

    Attributs :
        root_path: Répertoire des clips sur la carte.
        output_dir: Répertoire recevant un dossier par groupe.
        prompts: Source des réponses utilisateur.
        kinds: Types d'opération proposés.
        dry_run: Si True, aucune écriture n'est effectuée.
        operations: Opérations définies pour cette exécution.
    """

    def __init__(
        self,
        root: Path,
        output_dir: Path,
        prompts: LineSource,
        mkdir: bool = False,
        dry_run: bool = False,
        kinds: Sequence[OperationKind] = tuple(OperationKind),
    ) -> None:
        """
        Vérifie la carte et le répertoire de sortie.

        Arguments :
            root: Point de montage de la carte.
            output_dir: Répertoire de sortie.
            prompts: Source des réponses utilisateur.
            mkdir: Crée le répertoire de sortie s'il n'existe pas.
            dry_run: Mode simulation.
            kinds: Types d'opération proposés.

        Lève :
            InvalidRootError: Si la carte n'a pas de répertoire de clips.
            OutputDirectoryNotFoundError: Si la sortie manque et mkdir est False.
            OutputDirectoryNotEmptyError: Si la sortie n'est pas vide.
            MediaIOError: Sur toute erreur du système de fichiers.
        """
        logger.debug("Checking root directory")
        self.root_path = media_directory(root)
        logger.debug("Root is valid!")

        logger.debug("Checking output directory")
        self.output_dir = prepare_output_directory(output_dir, mkdir, dry_run)
        logger.debug("Output is valid!")

        self.prompts = prompts
        self.kinds = tuple(kinds)
        self.dry_run = dry_run
        self.operations: List[MapOp] = []
        self._catalog: Optional[MediaCatalog] = None

    @property
    def catalog(self) -> MediaCatalog:
        """Retourne le catalogue chargé."""
        if self._catalog is None:
            raise RuntimeError("Media not loaded. Call load_media() first.")
        return self._catalog

    def __len__(self) -> int:
        return len(self._catalog) if self._catalog is not None else 0

    def load_media(self) -> MediaCatalog:
        """
        Construit le catalogue des clips.

        Retourne :
            Le catalogue, trié par numéro de clip.

        Lève :
            NoVideosError: Si aucun clip n'est trouvé.
        """
        self._catalog = build_catalog(self.root_path)
        return self._catalog

    def get_range(self) -> Tuple[int, int]:
        """Retourne le plus petit et le plus grand numéro de clip."""
        if self._catalog is None:
            return 0, 0
        return self._catalog.id_range()

    def validate(self) -> ValidationResult:
        """Valide les opérations définies, sans effet de bord."""
        return validate_operations(self.operations)

    def prompt_for_ops(self) -> List[MapOp]:
        """
        Ajoute les opérations saisies par l'utilisateur puis les valide.

        Retourne :
            Les opérations ajoutées.

        Lève :
            InvalidInputError: Sur une réponse invalide.
            OperationValidationError: Si l'ensemble est vide ou se chevauche.
        """
        added = prompt_for_operations(self.prompts, self.kinds)
        self.operations.extend(added)
        ensure_valid(self.operations)
        return added

    def group_by_day(self) -> List[MapOp]:
        """
        Ajoute une opération par jour de tournage puis les valide.

        Retourne :
            Les opérations ajoutées.
        """
        added = group_by_day(self.catalog, self.prompts, self.kinds)
        self.operations.extend(added)
        ensure_valid(self.operations)
        return added

    def execute(self) -> ExecutionReport:
        """
        Exécute les opérations dans l'ordre de définition.

        Retourne :
            ExecutionReport de l'exécution.

        Lève :
            OperationValidationError: Si les opérations ne sont pas valides.
            MediaIOError: À la première erreur d'écriture, sans retour arrière.
        """
        ensure_valid(self.operations)
        report = execute_operations(
            self.catalog,
            self.operations,
            self.root_path,
            self.output_dir,
            self.dry_run,
        )
        logger.info(f"{report.files} fichier(s) copiés dans {len(report.groups)} dossier(s)")
        return report
