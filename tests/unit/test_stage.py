"""Unit tests for staged file access."""

import pytest
import pandas as pd
from unittest.mock import patch
from demohub.datasets.iot_db import sensor_data
from demohub.datasets.stage import (
    list_staged_files,
    fetch_staged_files,
    local_staged_files,
    read_staged_csv,
    match_columns,
    frame_to_records,
)


class TestListStagedFiles:
    """Test listing of staged files."""

    @patch('demohub.datasets.stage.list_s3_keys')
    def test_lists_csv_under_stage_root(self, mock_list):
        """Test the stage root is prepended and only CSV keys are asked for."""
        mock_list.return_value = ['data/iot/sensor_data/train_FD001.csv']

        keys = list_staged_files('iot/sensor_data/', bucket='demohubpublic')

        assert keys == ['data/iot/sensor_data/train_FD001.csv']
        mock_list.assert_called_once_with(
            'demohubpublic', 'data/iot/sensor_data/', suffixes=('.csv',)
        )


class TestFetchStagedFiles:
    """Test downloading staged files."""

    @patch('demohub.datasets.stage.download_object')
    @patch('demohub.datasets.stage.list_staged_files')
    def test_downloads_to_cache(self, mock_list, mock_download, tmp_path):
        """Test files land under dest_dir/prefix."""
        mock_list.return_value = ['data/iot/sensor_data/train_FD001.csv']
        mock_download.return_value = True

        paths = fetch_staged_files('iot/sensor_data/', dest_dir=tmp_path, bucket='demohubpublic')

        assert paths == [tmp_path / 'iot/sensor_data' / 'train_FD001.csv']
        mock_download.assert_called_once()

    @patch('demohub.datasets.stage.download_object')
    @patch('demohub.datasets.stage.list_staged_files')
    def test_cached_file_not_downloaded(self, mock_list, mock_download, tmp_path):
        """Test cached files are reused."""
        cached = tmp_path / 'iot' / 'sensor_data' / 'train_FD001.csv'
        cached.parent.mkdir(parents=True)
        cached.write_text('unit_number\n1\n')
        mock_list.return_value = ['data/iot/sensor_data/train_FD001.csv']

        paths = fetch_staged_files('iot/sensor_data/', dest_dir=tmp_path)

        assert paths == [cached]
        mock_download.assert_not_called()

    @patch('demohub.datasets.stage.list_staged_files')
    def test_nothing_staged(self, mock_list, tmp_path):
        """Test an empty stage path raises."""
        mock_list.return_value = []
        with pytest.raises(FileNotFoundError):
            fetch_staged_files('iot/sensor_data/', dest_dir=tmp_path)

    @patch('demohub.datasets.stage.download_object')
    @patch('demohub.datasets.stage.list_staged_files')
    def test_failed_download(self, mock_list, mock_download, tmp_path):
        """Test a failed download raises."""
        mock_list.return_value = ['data/iot/sensor_data/train_FD001.csv']
        mock_download.return_value = False
        with pytest.raises(IOError):
            fetch_staged_files('iot/sensor_data/', dest_dir=tmp_path)


class TestLocalFiles:
    """Test reading staged files from disk."""

    def test_local_staged_files(self, stage_dir):
        """Test files under the stage path are found."""
        files = local_staged_files(stage_dir, 'iot/sensor_data/')
        assert [path.name for path in files] == ['train_FD001.csv']

    def test_flat_directory_fallback(self, tmp_path):
        """Test a directory holding the files directly."""
        (tmp_path / 'a.csv').write_text('x\n1\n')
        assert local_staged_files(tmp_path, 'iot/sensor_data/') == [tmp_path / 'a.csv']

    def test_no_files(self, tmp_path):
        """Test an empty directory raises."""
        with pytest.raises(FileNotFoundError):
            local_staged_files(tmp_path, 'iot/sensor_data/')

    def test_read_staged_csv_trims(self, tmp_path):
        """Test header, blank lines and whitespace handling."""
        path = tmp_path / 'data.csv'
        path.write_text(' UNIT_NUMBER , Name \n1,  alpha \n\n2,beta\n')

        df = read_staged_csv([path])

        assert list(df.columns) == ['UNIT_NUMBER', 'Name']
        assert df['Name'].tolist() == ['alpha', 'beta']
        assert df['UNIT_NUMBER'].tolist() == [1, 2]

    def test_read_multiple_files(self, tmp_path):
        """Test files are concatenated."""
        for name in ('a.csv', 'b.csv'):
            (tmp_path / name).write_text('x\n1\n')
        assert len(read_staged_csv([tmp_path / 'a.csv', tmp_path / 'b.csv'])) == 2

    def test_read_nothing(self):
        """Test no files raises."""
        with pytest.raises(ValueError):
            read_staged_csv([])


class TestMatchColumns:
    """Test case-insensitive column matching."""

    def test_match_by_name(self):
        """Test extra columns dropped and missing columns NULL."""
        df = pd.DataFrame({'UNIT_NUMBER': [1], 'Time_In_Cycles': [5], 'T50': [1400.5], 'EXTRA': ['x']})

        matched = match_columns(df, sensor_data)

        assert 'EXTRA' not in matched.columns
        assert matched['unit_number'].tolist() == [1]
        assert matched['time_in_cycles'].tolist() == [5]
        assert matched['t50'].tolist() == [1400.5]
        assert matched['w32'].tolist() == [None]
        # created_at is filled by the database
        assert 'created_at' not in matched.columns

    def test_frame_to_records_nulls(self):
        """Test NaN becomes None."""
        df = pd.DataFrame({'a': [1.0, float('nan')], 'b': ['x', None]})
        assert frame_to_records(df) == [{'a': 1.0, 'b': 'x'}, {'a': None, 'b': None}]
