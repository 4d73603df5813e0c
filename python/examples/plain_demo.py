from chatty import init, get_logger, set_global_output_format, set_global_severity_level

def main():
    init()
    set_global_output_format("plain")
    set_global_severity_level("debug")
    log = get_logger()

    log.debug("this message appears if the level was defined as debug")
    log.debugf("debug message is hello %s", "world")
    log.info("database connected")

    user_id = 10
    log.infof("user %d changed its password", user_id)
    log.info_kv("including bank branch", {"code": 1588, "branch": "münch", "address": None})
    log.warnf("blocking user %d for too many login attempts", user_id)
    log.error("could not connect external service xyz")

    err = RuntimeError("this is an example error")
    log.error_exc(err)
    log.errorf("error querying user %d investments: %s", user_id, err)
    log.error_kv("error including bank branch", {"code": 1588, "branch": "münch", "error": err})

    # log.fatal("ooops! critical failure") would exit the process with status 1
    print(log.last_record(), end="")

if __name__ == "__main__":
    main()
