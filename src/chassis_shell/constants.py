DEFAULT_HISTORY_SIZE = 20
DEFAULT_PROMPT = "WcsCli# "
DEFAULT_MAX_OUTPUT_LINES = 2000

# Control keys as delivered by curses getch()
CTRL_A = 1
CTRL_E = 5
CTRL_K = 11
CTRL_U = 21
TAB = 9
ESC = 27
ENTER_KEYS = (10, 13)
BACKSPACE_KEYS = (127, 8)

KEY_NAMES = {
    CTRL_A: "C-a",
    CTRL_E: "C-e",
    CTRL_K: "C-k",
    CTRL_U: "C-u",
    TAB: "TAB",
    ESC: "ESC",
    10: "ENTER",
    13: "ENTER",
    127: "BS",
    8: "BS",
}

# Command words offered by tab completion
DEFAULT_COMMANDS = (
    "wcscli",
    # Infrastructure
    "-getserviceversion", "-getchassisinfo", "-getchassishealth", "-getbladeinfo",
    "-getbladehealth", "-updatepsufw", "-getpsufwstatus",
    # Blade management
    "-getpowerstate", "-setpoweron", "-setpoweroff", "-getbladestate", "-setbladeon",
    "-setbladeoff", "-setbladedefaultpowerstate", "-getbladedefaultpowerstate",
    "-setbladeactivepowercycle", "-getnextboot", "-setnextboot", "-setbladeattentionledon",
    "-setbladeattentionledoff", "-readbladelog", "-clearbladelog", "-getbladepowerreading",
    "-getbladepowerlimit", "-setbladepowerlimit", "-setbladepowerlimiton",
    "-setbladepowerlimitoff", "-setdatasafebladeon", "-setdatasafepoweron",
    "-setdatasafebladeoff", "-setdatasafepoweroff", "-setbladedatasafeactivepowercycle",
    "-getbladedatasafepowerstate", "-getbladebiospostcode", "-setbladepsualertdpc",
    "-getbladepsualertdpc", "-getbladepsualert", "-activatedeactivatebladepsualert",
    "-getbladeassetinfo", "-getblademezzassetinfo", "-setbladeassetinfo",
    "-getblademezzpassthroughmode", "-setblademezzpassthroughmode",
    # Chassis management
    "-getchassisattentionledstatus", "-setchassisattentionledon", "-setchassisattentionledoff",
    "-readchassislog", "-clearchassislog", "-getacsocketpowerstate", "-setacsocketpowerstateon",
    "-setacsocketpowerstateoff", "-getchassismanagerassetinfo", "-getpdbassetinfo",
    "-setchassismanagerassetinfo", "-setpdbassetinfo",
    # Local (serial mode)
    "-setnic", "-getnic", "-clear",
    # Service configuration
    "-startchassismanager", "-stopchassismanager", "-getchassismanagerstatus",
    "-enablechassismanagerssl", "-disablechassismanagerssl",
    # User management
    "-adduser", "-changeuserrole", "-changeuserpwd", "-removeuser",
    # Serial sessions
    "-startbladeserialsession", "-stopbladeserialsession", "-startportserialsession",
    "-stopportserialsession", "-establishcmconnection", "-terminatecmconnection",
)

# Commands handled by the shell itself rather than the executor
LOCAL_COMMANDS = {
    "help": "show this list",
    "history": "list remembered commands",
    "clear": "clear command history and the screen",
    "debug": "toggle debug logging to chassis_*.log",
    "exit": "leave the shell (also: quit)",
}
