"""
Catalog directory scaffolding.

Creates the numbered course tree (commons datasets and utils, then one
directory per track) with a ``.gitkeep`` in every directory and the
placeholder script files, and adds ``.gitkeep`` files to empty directories
of an existing tree.
"""

import os
from pathlib import Path
from typing import List, Optional, Union

from pydantic import BaseModel, Field

from ..config import config
from ..utils.logger import get_logger

logger = get_logger(__name__)

GITKEEP = ".gitkeep"

CATALOG_DIRECTORIES = [
    "00_commons/datasets/01_sales_db",
    "00_commons/datasets/02_cares_db",
    "00_commons/datasets/03_orders_db",
    "00_commons/datasets/04_iot_db",
    "00_commons/datasets/05_medis_db",
    "00_commons/utils",
    "01_advanced_warehousing/01_data_quality_metrics",
    "01_advanced_warehousing/02_higher_order_functions",
    "01_advanced_warehousing/03_data_classification",
    "01_advanced_warehousing/04_asof_join",
    "01_advanced_warehousing/05_fuzzy_matching",
    "01_advanced_warehousing/06_aggregation_policies",
    "01_advanced_warehousing/07_projection_policies",
    "01_advanced_warehousing/08_jmeter_testing",
    "01_advanced_warehousing/09_memoizable_functions",
    "01_advanced_warehousing/10_observability",
    "02_engineering_lake/01_dynamic_tables",
    "02_engineering_lake/02_change_management_git/migrations",
    "02_engineering_lake/03_change_management_templates/jinja_templates",
    "02_engineering_lake/03_change_management_templates/sql_templates",
    "03_classic_aiml/01_cortex_forecasting",
    "03_classic_aiml/02_cortex_anomaly_detection",
    "03_classic_aiml/03_cortex_classification",
    "03_classic_aiml/04_snowpark_ml/notebooks",
    "03_classic_aiml/04_snowpark_ml/model_registry",
    "03_classic_aiml/04_snowpark_ml/feature_store",
    "04_genai_llms/01_embeddings_vector_search",
    "04_genai_llms/02_copilot_integration",
    "04_genai_llms/03_universal_search",
    "04_genai_llms/04_streamlit_chatbot",
    "04_genai_llms/05_document_ai",
    "04_genai_llms/06_cortex_llm_finetuning",
    "05_applications/01_native_apps",
    "05_applications/02_streamlit",
    "05_applications/03_snowsight_dashboards",
    "05_applications/04_external_connect",
    "05_applications/05_python_integration",
    "05_applications/06_restful_apis",
    "06_collaboration_sharing/01_marketplace",
    "06_collaboration_sharing/02_data_clean_room",
    "06_collaboration_sharing/03_data_exchange",
    "06_collaboration_sharing/04_secure_data_sharing",
    "06_collaboration_sharing/05_collaboration_tools",
    "07_admins_ops/01_metadata_queries",
    "07_admins_ops/02_trust_center",
    "07_admins_ops/03_cost_insights",
    "08_solutions/01_industry_solutions/retail",
    "08_solutions/01_industry_solutions/healthcare",
    "08_solutions/01_industry_solutions/financial_services",
    "08_solutions/01_industry_solutions/manufacturing",
    "08_solutions/01_industry_solutions/technology",
    "08_solutions/01_industry_solutions/media_entertainment",
    "08_solutions/01_industry_solutions/public_sector",
    "08_solutions/01_industry_solutions/education",
    "08_solutions/02_patterns/data_mesh",
    "08_solutions/02_patterns/data_sharing",
    "08_solutions/02_patterns/zero_copy_clone",
    "08_solutions/02_patterns/dynamic_tables",
    "08_solutions/02_patterns/streams_tasks",
    "08_solutions/03_frameworks/data_governance",
    "08_solutions/03_frameworks/security_compliance",
    "08_solutions/03_frameworks/cost_optimization",
    "08_solutions/03_frameworks/performance_tuning",
    "08_solutions/04_reference_architectures/data_warehouse",
    "08_solutions/04_reference_architectures/data_lake",
    "08_solutions/04_reference_architectures/data_science",
    "08_solutions/04_reference_architectures/data_applications",
    "08_solutions/05_accelerators/etl_migration",
    "08_solutions/05_accelerators/cloud_migration",
    "08_solutions/05_accelerators/application_modernization",
    "09_knowledge/01_snowflake_concepts/data_architecture",
    "09_knowledge/01_snowflake_concepts/security_governance",
    "09_knowledge/01_snowflake_concepts/performance_optimization",
    "09_knowledge/01_snowflake_concepts/cost_management",
    "09_knowledge/02_best_practices/development",
    "09_knowledge/02_best_practices/deployment",
    "09_knowledge/02_best_practices/monitoring",
    "09_knowledge/02_best_practices/maintenance",
    "09_knowledge/03_implementation_guides/setup",
    "09_knowledge/03_implementation_guides/configuration",
    "09_knowledge/03_implementation_guides/integration",
    "09_knowledge/03_implementation_guides/troubleshooting",
    "09_knowledge/04_reference_materials/white_papers",
    "09_knowledge/04_reference_materials/case_studies",
    "09_knowledge/04_reference_materials/architecture_patterns",
    "09_knowledge/05_training_materials/getting_started",
    "09_knowledge/05_training_materials/advanced_topics",
    "09_knowledge/05_training_materials/certification_prep",
]

PLACEHOLDER_FILES = [
    "01_advanced_warehousing/01_data_quality_metrics/01_01_01_metrics_functions.sql",
    "01_advanced_warehousing/02_higher_order_functions/01_02_01_hof_examples.sql",
    "01_advanced_warehousing/03_data_classification/01_03_01_classification_tagging.sql",
    "01_advanced_warehousing/04_asof_join/01_04_01_asof_examples.sql",
    "01_advanced_warehousing/05_fuzzy_matching/01_05_01_soundex_matching.sql",
    "01_advanced_warehousing/06_aggregation_policies/01_06_01_agg_policies.sql",
    "01_advanced_warehousing/07_projection_policies/01_07_01_proj_policies.sql",
    "01_advanced_warehousing/08_jmeter_testing/01_08_01_load_test.jmx",
    "01_advanced_warehousing/09_memoizable_functions/01_09_01_memo_functions.sql",
    "01_advanced_warehousing/10_observability/01_10_01_trails.sql",
    "01_advanced_warehousing/10_observability/01_10_02_logs_analysis.sql",
    "04_genai_llms/01_embeddings_vector_search/04_01_01_vector_store_setup.sql",
    "04_genai_llms/01_embeddings_vector_search/04_01_02_embedding_generation.py",
    "04_genai_llms/01_embeddings_vector_search/04_01_03_similarity_search.sql",
    "09_knowledge/01_snowflake_concepts/data_architecture/09_01_01_warehouse_concepts.md",
    "09_knowledge/01_snowflake_concepts/data_architecture/09_01_02_storage_concepts.md",
    "09_knowledge/01_snowflake_concepts/security_governance/09_01_03_security_model.md",
    "09_knowledge/01_snowflake_concepts/performance_optimization/09_01_04_query_optimization.md",
    "09_knowledge/01_snowflake_concepts/cost_management/09_01_05_credit_management.md",
    "09_knowledge/02_best_practices/development/09_02_01_coding_standards.md",
    "09_knowledge/02_best_practices/deployment/09_02_02_deployment_guidelines.md",
    "09_knowledge/02_best_practices/monitoring/09_02_03_monitoring_practices.md",
    "09_knowledge/02_best_practices/maintenance/09_02_04_maintenance_procedures.md",
    "09_knowledge/03_implementation_guides/setup/09_03_01_initial_setup.md",
    "09_knowledge/03_implementation_guides/configuration/09_03_02_config_guide.md",
    "09_knowledge/03_implementation_guides/integration/09_03_03_integration_patterns.md",
    "09_knowledge/03_implementation_guides/troubleshooting/09_03_04_common_issues.md",
    "09_knowledge/04_reference_materials/white_papers/09_04_01_architecture_overview.md",
    "09_knowledge/04_reference_materials/case_studies/09_04_02_success_stories.md",
    "09_knowledge/04_reference_materials/architecture_patterns/09_04_03_design_patterns.md",
    "09_knowledge/05_training_materials/getting_started/09_05_01_quickstart_guide.md",
    "09_knowledge/05_training_materials/advanced_topics/09_05_02_advanced_features.md",
    "09_knowledge/05_training_materials/certification_prep/09_05_03_exam_prep.md",
    "00_commons/datasets/04_iot_db/00_01_02_iot_model.sql",
]


class CatalogTree(BaseModel):
    """Directories and files present after scaffolding, relative to the root."""

    root: Path
    directories: List[str] = Field(default_factory=list)
    files: List[str] = Field(default_factory=list)


def _touch(path: Path) -> None:
    # existing files keep their content
    path.touch(exist_ok=True)


def create_catalog_tree(root: Optional[Union[str, Path]] = None) -> CatalogTree:
    """
    Create the catalog directory tree under ``root``.

    Every directory gets a ``.gitkeep``; placeholder files are created empty
    (their parent directories included). Running it again on an existing
    tree changes nothing.

    Args:
        root: Catalog root directory. If None, uses config.

    Returns:
        CatalogTree summary.
    """
    root = Path(root or config.catalog.root)
    tree = CatalogTree(root=root)

    for directory in CATALOG_DIRECTORIES:
        path = root / directory
        path.mkdir(parents=True, exist_ok=True)
        _touch(path / GITKEEP)
        tree.directories.append(directory)

    for file_name in PLACEHOLDER_FILES:
        path = root / file_name
        path.parent.mkdir(parents=True, exist_ok=True)
        _touch(path)
        tree.files.append(file_name)

    logger.info(
        f"Directory structure created under {root}: "
        f"{len(tree.directories)} directories, {len(tree.files)} files"
    )
    return tree


def add_gitkeep(root: Optional[Union[str, Path]] = None) -> List[Path]:
    """
    Add a ``.gitkeep`` file to every empty directory under ``root``.

    The root itself counts when it is empty. Hidden directories (and
    everything below them) are skipped.

    Returns:
        Directories that received a ``.gitkeep``.
    """
    root = Path(root or config.catalog.root)
    if not root.is_dir():
        raise NotADirectoryError(f"Not a directory: {root}")

    touched = []
    for dirpath, dirnames, filenames in os.walk(root):
        dirnames[:] = sorted(name for name in dirnames if not name.startswith("."))
        if not os.listdir(dirpath):
            path = Path(dirpath)
            _touch(path / GITKEEP)
            touched.append(path)

    logger.info(f"Added .gitkeep files to {len(touched)} empty directories under {root}")
    return touched
