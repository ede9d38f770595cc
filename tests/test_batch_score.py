import json

import pytest

from wellcheck.batch_score import load_records, main

HEADER = ("age,biologicalSex,height,weight,activityLevel,sleepDuration,sleepQuality,stressLevel,"
          "dietPattern,waterIntake,smokingAlcohol,existingConditions,currentSymptoms,"
          "restingHeartRate,screenTime")
HEALTHY_ROW = "25,female,165,60,high,8,good,low,balanced,adequate,none,,,,3"
AT_RISK_ROW = "50,male,175,95,low,5,poor,high,high_sugar,low,frequent,,,105,11"
BAD_ROW = "30,male,-180,80,high,8,good,low,balanced,adequate,none,,,,2"


def write_csv(tmp_path, *rows):
    path = tmp_path / "records.csv"
    path.write_text("\n".join((HEADER,) + rows) + "\n", encoding="utf-8")
    return str(path)


class TestLoadRecords:

    def test_blank_optional_fields_normalized(self, tmp_path):
        rows = load_records(write_csv(tmp_path, HEALTHY_ROW, AT_RISK_ROW))
        assert rows[0]["restingHeartRate"] is None
        assert rows[0]["currentSymptoms"] == ""
        assert rows[1]["restingHeartRate"] == 105

    def test_json_input(self, tmp_path):
        path = tmp_path / "records.json"
        path.write_text(json.dumps([{"age": 25, "biologicalSex": "female"}]), encoding="utf-8")
        assert load_records(str(path))[0]["biologicalSex"] == "female"

    def test_unsupported_extension(self, tmp_path):
        path = tmp_path / "records.txt"
        path.write_text("", encoding="utf-8")
        with pytest.raises(ValueError):
            load_records(str(path))


class TestMain:

    def test_scores_every_row(self, tmp_path):
        out = tmp_path / "out.json"
        code = main([write_csv(tmp_path, HEALTHY_ROW, AT_RISK_ROW), "-o", str(out)])
        assert code == 0
        results = json.loads(out.read_text(encoding="utf-8"))
        assert [r["result"]["overallScore"] for r in results] == [0, 95]
        assert results[1]["riskLabel"] == "High Risk"

    def test_bad_row_reported_and_others_continue(self, tmp_path):
        out = tmp_path / "out.json"
        code = main([write_csv(tmp_path, BAD_ROW, AT_RISK_ROW), "-o", str(out)])
        assert code == 1
        results = json.loads(out.read_text(encoding="utf-8"))
        assert results[0]["row"] == 0 and "error" in results[0]
        assert results[1]["result"]["riskLevel"] == "high"

    def test_stdout_output(self, tmp_path, capsys):
        assert main([write_csv(tmp_path, HEALTHY_ROW)]) == 0
        results = json.loads(capsys.readouterr().out)
        assert results[0]["result"]["categories"] == []


class TestFreeTextColumns:

    def test_na_like_symptoms_kept_verbatim(self, tmp_path):
        row = "25,female,165,60,high,8,good,low,balanced,adequate,none,,NA,,3"
        rows = load_records(write_csv(tmp_path, row))
        assert rows[0]["currentSymptoms"] == "NA"
        assert rows[0]["restingHeartRate"] is None

        out = tmp_path / "out.json"
        assert main([write_csv(tmp_path, row), "-o", str(out)]) == 0
        result = json.loads(out.read_text(encoding="utf-8"))[0]["result"]
        assert result["shouldConsultProfessional"] is True

    def test_numeric_only_text_is_not_a_bad_row(self, tmp_path):
        row = "25,female,165,60,high,8,good,low,balanced,adequate,none,2,5,,3"
        rows = load_records(write_csv(tmp_path, row))
        assert rows[0]["existingConditions"] == "2"
        assert rows[0]["currentSymptoms"] == "5"

        out = tmp_path / "out.json"
        assert main([write_csv(tmp_path, row), "-o", str(out)]) == 0
        results = json.loads(out.read_text(encoding="utf-8"))
        assert "error" not in results[0]
        assert results[0]["result"]["shouldConsultProfessional"] is True

    def test_json_text_not_coerced(self, tmp_path):
        path = tmp_path / "records.json"
        path.write_text(json.dumps([{"age": 25, "currentSymptoms": "5"}]), encoding="utf-8")
        assert load_records(str(path))[0]["currentSymptoms"] == "5"
