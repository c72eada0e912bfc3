"""Remote method registry.

Each Smartschool webservice method is described by an :class:`Endpoint`:
the parameter names it requires, the ones it accepts optionally, and
whether the access code is sent along. Clients look methods up by name
instead of exposing one Python method per remote call.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from .core.errors import SmartschoolValidationError


@dataclass(slots=True, frozen=True)
class Endpoint:
    name: str
    required: tuple[str, ...] = ()
    optional: tuple[str, ...] = ()
    needs_auth: bool = True
    open_params: bool = False
    deprecated: bool = False

    @property
    def declared(self) -> tuple[str, ...]:
        return self.required + self.optional

    def build_params(
        self,
        params: Mapping[str, object],
        extra: Mapping[str, object] | None = None,
    ) -> dict[str, object]:
        """Validate ``params`` against the schema and return them in schema order.

        ``extra`` carries fields outside the schema; only endpoints with
        ``open_params`` accept it.
        """

        unknown = [key for key in params if key not in self.declared]
        if unknown:
            raise SmartschoolValidationError(
                f"{self.name}: unknown parameter(s) {', '.join(sorted(unknown))}"
            )
        missing = [key for key in self.required if params.get(key) is None]
        if missing:
            raise SmartschoolValidationError(
                f"{self.name}: missing required parameter(s) {', '.join(missing)}"
            )

        built = {key: params[key] for key in self.declared if key in params}
        if not extra:
            return built
        if not self.open_params:
            raise SmartschoolValidationError(f"{self.name} does not accept extra fields")
        clashing = [key for key in extra if key in self.declared]
        if clashing:
            raise SmartschoolValidationError(
                f"{self.name}: extra fields shadow declared parameter(s) "
                f"{', '.join(sorted(clashing))}"
            )
        built.update(extra)
        return built


_COURSE = ("coursename", "coursedesc")
_USER = ("userIdentifier",)
_USER_ACCOUNT = ("userIdentifier", "accountType")

_SAVE_USER_OPTIONAL = (
    "passwd1",
    "passwd2",
    "passwd3",
    "internnumber",
    "extranames",
    "initials",
    "sex",
    "birthdate",
    "birthcity",
    "birthcountry",
    "nationality",
    "address",
    "postalcode",
    "city",
    "country",
    "phone",
    "mobile",
    "email",
)

_ENDPOINTS: tuple[Endpoint, ...] = (
    # users
    Endpoint(
        "saveUser",
        required=("username", "name", "surname", "basisrol"),
        optional=_SAVE_USER_OPTIONAL,
        open_params=True,
    ),
    Endpoint("getUserDetails", required=_USER),
    Endpoint("getUserDetailsByNumber", required=("number",)),
    Endpoint("getUserDetailsByUsername", required=("username",)),
    Endpoint("getUserDetailsByScannableCode", required=("scannableCode",)),
    Endpoint("getUserOfficialClass", required=_USER, optional=("date",)),
    Endpoint("delUser", required=_USER, optional=("officialDate",)),
    Endpoint("setAccountStatus", required=_USER + ("accountStatus",)),
    Endpoint("changeUsername", required=("internNumber", "newUsername")),
    Endpoint("changeInternNumber", required=("username", "newInternNumber")),
    Endpoint("changePasswordAtNextLogin", required=_USER_ACCOUNT),
    Endpoint("forcePasswordReset", required=_USER_ACCOUNT),
    Endpoint("replaceInum", required=("oldInum", "newInum")),
    Endpoint("saveUserParameter", required=_USER + ("paramName", "paramValue")),
    Endpoint("savePassword", required=_USER_ACCOUNT + ("password", "changePasswordAtNextLogin")),
    Endpoint("removeCoAccount", required=_USER_ACCOUNT),
    Endpoint("getAllAccounts", required=("code", "recursive")),
    Endpoint("getAllAccountsExtended", required=("code", "recursive")),
    Endpoint("getStudentCareer", required=_USER),
    Endpoint("unregisterStudent", required=_USER, optional=("officialDate",)),
    Endpoint("deactivateTwoFactorAuthentication", required=_USER_ACCOUNT, deprecated=True),
    # groups and classes
    Endpoint("saveGroup", required=("name", "desc", "code", "parent", "untis")),
    Endpoint(
        "saveClass",
        required=("name", "desc", "code", "parent", "untis"),
        optional=("instituteNumber", "adminNumber", "schoolYearDate"),
    ),
    Endpoint("delClass", required=("code",)),
    Endpoint("getAllGroupsAndClasses"),
    Endpoint("getClassList"),
    Endpoint("getClassListJson"),
    Endpoint("getClassTeachers", optional=("getAllOwners",)),
    Endpoint("saveUserToClass", required=_USER + ("class",), optional=("officialDate",)),
    Endpoint("saveUserToClasses", required=_USER + ("csvList",)),
    Endpoint("saveUserToClassesAndGroups", required=_USER + ("csvList", "keepOld")),
    Endpoint("removeUserFromGroup", required=_USER + ("class",), optional=("officialDate",)),
    Endpoint("changeGroupOwners", required=("code", "userlist")),
    Endpoint("clearGroup", required=("group",), optional=("officialDate",)),
    Endpoint("saveClassList", required=("serializedList",)),
    Endpoint("saveClassListJson", required=("jsonList",)),
    Endpoint("getSchoolyearDataOfClass", required=("classCode",)),
    Endpoint(
        "saveSchoolyearDataOfClass",
        required=(
            "classCode",
            "date",
            "instituteNumber",
            "administrativeGroupNumber",
            "residence",
            "domain",
            "principal",
        ),
    ),
    Endpoint("getSkoreClassTeacherCourseRelation"),
    # messages
    Endpoint(
        "sendMsg",
        required=_USER + ("title", "body", "senderIdentifier"),
        optional=("attachments", "coaccount", "copyToLVS"),
    ),
    Endpoint("saveSignature", required=_USER_ACCOUNT + ("signature",)),
    # absences
    Endpoint("getAbsents", required=_USER + ("schoolYear",)),
    Endpoint("getAbsentsWithAlias", required=_USER + ("schoolYear",)),
    Endpoint("getAbsentsByDate", required=("date",)),
    Endpoint("getAbsentsWithAliasByDate", required=("date",)),
    Endpoint("getAbsentsWithInternalNumberByDate", required=("date",)),
    Endpoint("getAbsentsByDateAndGroup", required=("date", "code")),
    # photos
    Endpoint("getAccountPhoto", required=_USER),
    Endpoint("setAccountPhoto", required=_USER + ("photo",)),
    # courses
    Endpoint("addCourse", required=_COURSE, optional=("visibility",)),
    Endpoint("addCourseStudents", required=_COURSE + ("groupIds",), optional=("visibility",)),
    Endpoint(
        "addCourseTeacher",
        required=_COURSE + _USER + ("internnummer",),
        optional=("visibility",),
    ),
    Endpoint("getCourses"),
    # helpdesk
    Endpoint(
        "addHelpdeskTicket",
        required=_USER + ("title", "description", "priority", "miniDbItem"),
    ),
    Endpoint("getHelpdeskMiniDbItems"),
    # sync and system
    Endpoint("startSkoreSync"),
    Endpoint("checkStatus", required=("serviceId",)),
    Endpoint("getReferenceField"),
    # error codes
    Endpoint("returnCsvErrorCodes", needs_auth=False),
    Endpoint("returnJsonErrorCodes", needs_auth=False),
)

ENDPOINTS: Mapping[str, Endpoint] = {endpoint.name: endpoint for endpoint in _ENDPOINTS}


def get_endpoint(name: str) -> Endpoint:
    try:
        return ENDPOINTS[name]
    except KeyError:
        raise SmartschoolValidationError(f"unknown Smartschool method {name!r}") from None


__all__ = [
    "Endpoint",
    "ENDPOINTS",
    "get_endpoint",
]
