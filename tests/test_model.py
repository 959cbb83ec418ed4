import json

from svckit.model import ERROR_CODE, SUCCESS_CODE, ClientDetailsResp


def test_to_dict_uses_wire_field_names():
    resp = ClientDetailsResp(details_arr=[1, 2], status=SUCCESS_CODE, err_msg="")
    assert resp.to_dict() == {"respData": [1, 2], "status": "S", "errMsg": ""}


def test_defaults_serialise_as_empty_values():
    assert ClientDetailsResp().to_dict() == {"respData": None, "status": "", "errMsg": ""}


def test_to_dict_round_trips_through_json():
    resp = ClientDetailsResp(details_arr={"k": "v"}, status=ERROR_CODE, err_msg="bad input")
    decoded = json.loads(json.dumps(resp.to_dict()))
    rebuilt = ClientDetailsResp(
        details_arr=decoded["respData"], status=decoded["status"], err_msg=decoded["errMsg"]
    )
    assert rebuilt == resp
    assert decoded["status"] == "E"